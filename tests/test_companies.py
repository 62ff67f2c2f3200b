"""
Tests for the /companies endpoints.
"""

import pytest


class TestCompanyCreation:

    def test_create_company(self, client, admin_headers):
        response = client.post(
            "/companies",
            json={"handle": "new-co", "name": "New Co", "numEmployees": 10, "description": "New"},
            headers=admin_headers
        )

        assert response.status_code == 201
        assert response.json() == {
            "company": {
                "handle": "new-co",
                "name": "New Co",
                "description": "New",
                "numEmployees": 10,
                "logoUrl": None,
            }
        }

    def test_create_duplicate_handle(self, client, companies, admin_headers):
        response = client.post(
            "/companies",
            json={"handle": "c1", "name": "Another"},
            headers=admin_headers
        )
        assert response.status_code == 400

    def test_create_duplicate_name(self, client, companies, admin_headers):
        response = client.post(
            "/companies",
            json={"handle": "other", "name": "C1"},
            headers=admin_headers
        )
        assert response.status_code == 400

    @pytest.mark.parametrize("payload", [
        {"name": "No Handle"},
        {"handle": "Bad Handle", "name": "X"},
        {"handle": "ok", "name": "X", "numEmployees": -1},
        {"handle": "ok", "name": "X", "numEmployees": 2 ** 31},
        {"handle": "ok", "name": "X", "num_employees": 5},
    ])
    def test_create_invalid(self, client, admin_headers, payload):
        response = client.post("/companies", json=payload, headers=admin_headers)
        assert response.status_code == 400

    def test_create_non_admin(self, client, user_headers):
        response = client.post(
            "/companies",
            json={"handle": "new-co", "name": "New Co"},
            headers=user_headers
        )
        assert response.status_code == 403


class TestCompanyRetrieval:

    def test_list_companies(self, client, companies):
        response = client.get("/companies")

        assert response.status_code == 200
        assert [c["handle"] for c in response.json()["companies"]] == ["c1", "c2", "c3"]

    def test_get_company_with_jobs(self, client, job_ids):
        response = client.get("/companies/c1")

        assert response.status_code == 200
        company = response.json()["company"]
        assert company["name"] == "C1"
        assert company["jobs"] == [
            {"id": job_ids[0], "title": "J1", "salary": 1, "equity": "0.1"},
            {"id": job_ids[1], "title": "J2", "salary": 2, "equity": "0.2"},
            {"id": job_ids[2], "title": "J3", "salary": 3, "equity": None},
        ]

    def test_get_company_without_jobs(self, client, jobs):
        response = client.get("/companies/c3")
        assert response.json()["company"]["jobs"] == []

    def test_get_missing_company(self, client):
        response = client.get("/companies/nope")
        assert response.status_code == 404
