"""
Tests for the job data-access layer (app.crud.job).
"""

from decimal import Decimal

import pytest

from app.core.exceptions import BadRequestError, NotFoundError
from app.crud import job as job_crud
from app.models.job import Job
from app.schemas.job import JobNew, JobUpdate


class TestCreate:

    def test_create(self, db_session, companies):
        job = job_crud.create(
            db_session,
            JobNew(title="New", salary=50, equity="0.5", companyHandle="c2")
        )

        assert job.id is not None
        assert job.title == "New"
        assert job.equity == Decimal("0.5")
        assert db_session.get(Job, job.id) is not None

    def test_create_unknown_company(self, db_session, companies):
        with pytest.raises(BadRequestError):
            job_crud.create(db_session, JobNew(title="New", companyHandle="zzz"))


class TestGetMulti:

    def test_no_filters(self, db_session, jobs):
        titles = [j.title for j in job_crud.get_multi(db_session)]
        assert titles == ["J1", "J2", "J3", "J4"]

    def test_company_name_joined(self, db_session, jobs):
        names = {j.title: j.company_name for j in job_crud.get_multi(db_session)}
        assert names == {"J1": "C1", "J2": "C1", "J3": "C1", "J4": "C2"}

    def test_min_salary(self, db_session, jobs):
        titles = [j.title for j in job_crud.get_multi(db_session, min_salary=3)]
        assert titles == ["J3"]

    def test_min_salary_zero_excludes_null_salary(self, db_session, jobs):
        titles = [j.title for j in job_crud.get_multi(db_session, min_salary=0)]
        assert titles == ["J1", "J2", "J3"]

    def test_has_equity(self, db_session, jobs, companies):
        db_session.add(Job(title="Zero", salary=1, equity=Decimal("0"), company_handle="c3"))
        db_session.commit()

        titles = [j.title for j in job_crud.get_multi(db_session, has_equity=True)]
        assert titles == ["J1", "J2"]

    def test_title(self, db_session, jobs):
        titles = [j.title for j in job_crud.get_multi(db_session, title="4")]
        assert titles == ["J4"]

    def test_no_match(self, db_session, jobs):
        assert job_crud.get_multi(db_session, title="nothing") == []


class TestGet:

    def test_get(self, db_session, job_ids):
        job = job_crud.get(db_session, job_ids[3])
        assert job.title == "J4"
        assert job.company.handle == "c2"

    def test_get_not_found(self, db_session, jobs):
        with pytest.raises(NotFoundError):
            job_crud.get(db_session, 0)


class TestUpdate:

    def test_partial_update(self, db_session, job_ids):
        job = job_crud.update(db_session, job_ids[0], JobUpdate(title="Changed"))

        assert job.title == "Changed"
        assert job.salary == 1
        assert job.equity == Decimal("0.1")
        assert job.company_handle == "c1"

    def test_no_data(self, db_session, job_ids):
        with pytest.raises(BadRequestError):
            job_crud.update(db_session, job_ids[0], JobUpdate())

    def test_not_found(self, db_session, jobs):
        with pytest.raises(NotFoundError):
            job_crud.update(db_session, 0, JobUpdate(salary=5))


class TestRemove:

    def test_remove(self, db_session, job_ids):
        job_crud.remove(db_session, job_ids[0])
        assert db_session.get(Job, job_ids[0]) is None

    def test_remove_not_found(self, db_session, jobs):
        with pytest.raises(NotFoundError):
            job_crud.remove(db_session, 0)
