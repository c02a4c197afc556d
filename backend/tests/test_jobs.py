from jobboard.config import settings

from helpers import API, apply, auth, post_job, signup


class TestJobsCRUD:
    def test_create_job(self, client):
        _, token = signup(client, "hr@acme.example", user_type="employer")
        job = post_job(
            client, token,
            requirements=["3 years Python"],
            skills=["Python", "SQL"],
            salary={"min": 100000, "max": 200000, "currency": "KES"},
        )
        assert job["status"] == "active"
        assert job["type"] == "full-time"
        assert job["remote"] is False
        assert job["views"] == 0
        assert job["applications"] == 0
        assert job["requirements"] == ["3 years Python"]
        assert job["salary"] == {"min": 100000, "max": 200000, "currency": "KES"}

    def test_salary_needs_both_bounds(self, client):
        _, token = signup(client, "hr2@acme.example", user_type="employer")
        job = post_job(client, token, salary={"min": 100000})
        assert job["salary"] is None

    def test_seeker_cannot_post(self, client):
        _, token = signup(client, "seeker@example.com")
        r = client.post(f"{API}/jobs", json={
            "title": "x", "description": "x", "type": "contract", "location": "x", "category": "x",
        }, headers=auth(token))
        assert r.status_code == 403
        assert r.json()["error"] == "Only employers can post jobs"

    def test_post_requires_auth(self, client):
        r = client.post(f"{API}/jobs", json={"title": "x"})
        assert r.status_code == 401

    def test_missing_required_fields(self, client):
        _, token = signup(client, "hr3@acme.example", user_type="employer")
        r = client.post(f"{API}/jobs", json={"title": "Only a title"}, headers=auth(token))
        assert r.status_code == 400
        assert "error" in r.json()

    def test_empty_title_rejected(self, client):
        _, token = signup(client, "hr4@acme.example", user_type="employer")
        r = client.post(f"{API}/jobs", json={
            "title": "", "description": "x", "type": "contract", "location": "x", "category": "x",
        }, headers=auth(token))
        assert r.status_code == 400

    def test_invalid_type_rejected(self, client):
        _, token = signup(client, "hr5@acme.example", user_type="employer")
        r = client.post(f"{API}/jobs", json={
            "title": "x", "description": "x", "type": "gig", "location": "x", "category": "x",
        }, headers=auth(token))
        assert r.status_code == 400

    def test_get_job_counts_every_view(self, client):
        _, token = signup(client, "views@acme.example", user_type="employer")
        job = post_job(client, token)
        client.get(f"{API}/jobs/{job['id']}")
        client.get(f"{API}/jobs/{job['id']}")
        r = client.get(f"{API}/jobs/{job['id']}")
        assert r.status_code == 200
        assert r.json()["views"] == 3

    def test_get_job_includes_employer_profile(self, client):
        _, token = signup(client, "brand@acme.example", user_type="employer", companyName="Acme Kenya")
        job = post_job(client, token)
        r = client.get(f"{API}/jobs/{job['id']}")
        assert r.json()["employer"]["companyName"] == "Acme Kenya"

    def test_get_missing_job(self, client):
        r = client.get(f"{API}/jobs/does-not-exist")
        assert r.status_code == 404
        assert r.json() == {"error": "Job not found"}

    def test_update_job(self, client):
        _, token = signup(client, "edit@acme.example", user_type="employer")
        job = post_job(client, token)
        r = client.put(f"{API}/jobs/{job['id']}", json={"title": "Senior Backend Engineer", "status": "closed"},
                       headers=auth(token))
        assert r.status_code == 200
        assert r.json()["title"] == "Senior Backend Engineer"
        assert r.json()["status"] == "closed"
        assert r.json()["description"] == job["description"]

    def test_update_cannot_touch_counters(self, client):
        _, token = signup(client, "counters@acme.example", user_type="employer")
        job = post_job(client, token)
        r = client.put(f"{API}/jobs/{job['id']}", json={"views": 1000, "applications": 50},
                       headers=auth(token))
        assert r.status_code == 200
        assert r.json()["views"] == 0
        assert r.json()["applications"] == 0

    def test_only_owner_can_update(self, client):
        _, owner = signup(client, "owner@acme.example", user_type="employer")
        _, other = signup(client, "other@acme.example", user_type="employer")
        job = post_job(client, owner)
        r = client.put(f"{API}/jobs/{job['id']}", json={"title": "Hijacked"}, headers=auth(other))
        assert r.status_code == 403

    def test_delete_job(self, client):
        _, token = signup(client, "delete@acme.example", user_type="employer")
        job = post_job(client, token)
        r = client.delete(f"{API}/jobs/{job['id']}", headers=auth(token))
        assert r.status_code == 200
        assert client.get(f"{API}/jobs/{job['id']}").status_code == 404

    def test_only_owner_can_delete(self, client):
        _, owner = signup(client, "owner2@acme.example", user_type="employer")
        _, other = signup(client, "other2@acme.example", user_type="employer")
        job = post_job(client, owner)
        r = client.delete(f"{API}/jobs/{job['id']}", headers=auth(other))
        assert r.status_code == 403

    def test_delete_removes_applications(self, client):
        _, employer = signup(client, "cascade@acme.example", user_type="employer")
        _, seeker = signup(client, "applicant@example.com")
        job = post_job(client, employer)
        application = apply(client, seeker, job["id"]).json()

        client.delete(f"{API}/jobs/{job['id']}", headers=auth(employer))
        r = client.get(f"{API}/applications/{application['id']}", headers=auth(seeker))
        assert r.status_code == 404


class TestMyJobs:
    def test_lists_own_jobs_including_drafts(self, client):
        _, token = signup(client, "mine@acme.example", user_type="employer")
        _, other = signup(client, "theirs@acme.example", user_type="employer")
        post_job(client, token, title="Live")
        post_job(client, token, title="Draft", status="draft")
        post_job(client, other, title="Not mine")

        r = client.get(f"{API}/jobs/my-jobs", headers=auth(token))
        assert r.status_code == 200
        titles = [j["title"] for j in r.json()["jobs"]]
        assert titles == ["Draft", "Live"]

    def test_seeker_forbidden(self, client):
        _, token = signup(client, "nosy@example.com")
        r = client.get(f"{API}/jobs/my-jobs", headers=auth(token))
        assert r.status_code == 403


class TestJobListing:
    def test_only_active_jobs_listed(self, client):
        _, token = signup(client, "list@acme.example", user_type="employer")
        post_job(client, token, title="Open role")
        post_job(client, token, title="Draft role", status="draft")
        post_job(client, token, title="Closed role", status="closed")

        r = client.get(f"{API}/jobs")
        assert r.status_code == 200
        data = r.json()
        assert [j["title"] for j in data["jobs"]] == ["Open role"]
        assert data["total"] == 1

    def test_newest_first(self, client):
        _, token = signup(client, "order@acme.example", user_type="employer")
        post_job(client, token, title="First")
        post_job(client, token, title="Second")
        r = client.get(f"{API}/jobs")
        assert [j["title"] for j in r.json()["jobs"]] == ["Second", "First"]

    def test_filters(self, client):
        _, token = signup(client, "filters@acme.example", user_type="employer")
        post_job(client, token, title="Designer", category="Design", type="contract")
        post_job(client, token, title="Remote Dev", remote=True)
        post_job(client, token, title="Office Dev")

        r = client.get(f"{API}/jobs?category=Design")
        assert [j["title"] for j in r.json()["jobs"]] == ["Designer"]

        r = client.get(f"{API}/jobs?type=contract")
        assert [j["title"] for j in r.json()["jobs"]] == ["Designer"]

        r = client.get(f"{API}/jobs?remote=true")
        assert [j["title"] for j in r.json()["jobs"]] == ["Remote Dev"]

    def test_text_search(self, client):
        _, token = signup(client, "search@acme.example", user_type="employer")
        post_job(client, token, title="Data Analyst", description="Dashboards and SQL")
        post_job(client, token, title="Accountant", description="Ledgers")

        r = client.get(f"{API}/jobs?search=dashboards")
        assert [j["title"] for j in r.json()["jobs"]] == ["Data Analyst"]

        r = client.get(f"{API}/jobs?search=ledgers analyst")
        assert {j["title"] for j in r.json()["jobs"]} == {"Data Analyst", "Accountant"}

    def test_search_with_fts_syntax_is_safe(self, client):
        _, token = signup(client, "fts@acme.example", user_type="employer")
        post_job(client, token, title="Quantum Engineer")
        r = client.get(f"{API}/jobs", params={"search": 'quantum" OR NEAR('})
        assert r.status_code == 200
        assert [j["title"] for j in r.json()["jobs"]] == ["Quantum Engineer"]

    def test_search_after_title_update(self, client):
        _, token = signup(client, "reindex@acme.example", user_type="employer")
        job = post_job(client, token, title="Gardener")
        client.put(f"{API}/jobs/{job['id']}", json={"title": "Horticulturist"}, headers=auth(token))
        assert client.get(f"{API}/jobs?search=gardener").json()["jobs"] == []
        assert len(client.get(f"{API}/jobs?search=horticulturist").json()["jobs"]) == 1

    def test_listing_cap(self, client, monkeypatch):
        _, token = signup(client, "cap@acme.example", user_type="employer")
        for i in range(4):
            post_job(client, token, title=f"Job {i}")
        monkeypatch.setattr(settings, "job_listing_cap", 3)
        r = client.get(f"{API}/jobs")
        assert len(r.json()["jobs"]) == 3

    def test_listing_embeds_employer_profiles(self, client):
        _, first = signup(client, "a@corp.example", user_type="employer", companyName="Alpha")
        _, second = signup(client, "b@corp.example", user_type="employer", companyName="Beta")
        post_job(client, first, title="Alpha job")
        post_job(client, second, title="Beta job")
        jobs = client.get(f"{API}/jobs").json()["jobs"]
        assert {j["title"]: j["employer"]["companyName"] for j in jobs} == {
            "Alpha job": "Alpha",
            "Beta job": "Beta",
        }


class TestJobSalaryBounds:
    def test_salary_beyond_integer_range_rejected(self, client):
        _, token = signup(client, "bounds@acme.example", user_type="employer")
        r = client.post(f"{API}/jobs", json={
            "title": "x", "description": "x", "type": "contract", "location": "x", "category": "x",
            "salary": {"min": 1, "max": 10**20},
        }, headers=auth(token))
        assert r.status_code == 400
