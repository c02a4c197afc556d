import pytest

from jobboard.models.profile import JobSeekerProfile

from helpers import API, auth, save_profile, signup


def _search(client, token, **params):
    return client.get(f"{API}/jobseekers", params=params, headers=auth(token))


def _ids(response):
    return [s["id"] for s in response.json()["jobSeekers"]]


@pytest.fixture
def employer(client):
    _, token = signup(client, "talent@acme.example", user_type="employer", companyName="Acme")
    return token


@pytest.fixture
def seekers(client):
    """Seeker A does frontend work on a modest salary, seeker B designs and asks for more."""
    a_id, a_token = signup(client, "amina@example.com", first_name="Amina", last_name="Odhiambo")
    save_profile(
        client, a_token, a_id,
        skills=["React", "Node"],
        desiredSalary=50000,
        currency="USD",
        availability="immediate",
        location="Mombasa",
        desiredJobTitle="Frontend Developer",
    )
    b_id, b_token = signup(client, "brian@example.com", first_name="Brian", last_name="Mwangi")
    save_profile(
        client, b_token, b_id,
        skills=["Design"],
        desiredSalary=90000,
        bio="Product designer who loves typography",
    )
    return {"a": a_id, "b": b_id, "a_token": a_token, "b_token": b_token}


class TestSearchAccess:
    def test_requires_auth(self, client):
        assert client.get(f"{API}/jobseekers").status_code == 401

    def test_seekers_are_denied(self, client, seekers):
        r = _search(client, seekers["a_token"])
        assert r.status_code == 403
        assert r.json() == {"error": "Access denied"}


class TestSearchFilters:
    def test_skill_filter(self, client, employer, seekers):
        assert _ids(_search(client, employer, skills="React")) == [seekers["a"]]

    def test_skill_filter_is_case_insensitive_substring(self, client, employer, seekers):
        assert _ids(_search(client, employer, skills="reac")) == [seekers["a"]]

    def test_any_listed_skill_matches(self, client, employer, seekers):
        r = _search(client, employer, skills="Node,Design")
        assert set(_ids(r)) == {seekers["a"], seekers["b"]}

    def test_minimum_salary(self, client, employer, seekers):
        assert _ids(_search(client, employer, salaryMin=60000)) == [seekers["b"]]

    def test_salary_range_skips_unset_salaries(self, client, employer, seekers):
        signup(client, "nosalary@example.com")
        r = _search(client, employer, salaryMin=40000, salaryMax=60000)
        assert _ids(r) == [seekers["a"]]

    def test_availability(self, client, employer, seekers):
        r = _search(client, employer, availability="2weeks")
        assert r.status_code == 200
        assert _ids(r) == []
        assert r.json()["total"] == 0
        assert r.json()["totalPages"] == 0

    def test_unknown_availability_rejected(self, client, employer, seekers):
        assert _search(client, employer, availability="someday").status_code == 400

    def test_location_matches_profile(self, client, employer, seekers):
        assert _ids(_search(client, employer, location="mombasa")) == [seekers["a"]]

    def test_location_matches_account_country(self, client, employer, seekers):
        r = _search(client, employer, location="Kenya")
        assert set(_ids(r)) == {seekers["a"], seekers["b"]}

    def test_search_by_name(self, client, employer, seekers):
        assert _ids(_search(client, employer, search="mwangi")) == [seekers["b"]]

    def test_search_by_profile_fields(self, client, employer, seekers):
        assert _ids(_search(client, employer, search="typography")) == [seekers["b"]]
        assert _ids(_search(client, employer, search="frontend")) == [seekers["a"]]

    def test_search_escapes_wildcards(self, client, employer, seekers):
        assert _ids(_search(client, employer, search="%")) == []

    def test_filters_combine(self, client, employer, seekers):
        r = _search(client, employer, skills="React", salaryMin=60000)
        assert _ids(r) == []

    def test_employment_type_is_accepted(self, client, employer, seekers):
        r = _search(client, employer, employmentType="contract")
        assert r.status_code == 200
        assert r.json()["total"] == 2


class TestSearchResults:
    def test_employers_never_returned(self, client, employer, seekers):
        r = _search(client, employer, search="acme")
        assert _ids(r) == []

    def test_accounts_without_profile_excluded(self, client, employer, seekers, test_db):
        db = test_db()
        db.query(JobSeekerProfile).filter(JobSeekerProfile.account_id == seekers["b"]).delete()
        db.commit()
        db.close()

        assert _ids(_search(client, employer)) == [seekers["a"]]

    def test_most_recently_updated_first(self, client, employer, seekers):
        assert _ids(_search(client, employer)) == [seekers["b"], seekers["a"]]
        save_profile(client, seekers["a_token"], seekers["a"], bio="Now open to remote roles")
        assert _ids(_search(client, employer)) == [seekers["a"], seekers["b"]]

    def test_summary_shape(self, client, employer, seekers):
        r = _search(client, employer, skills="React")
        candidate = r.json()["jobSeekers"][0]
        assert candidate["firstName"] == "Amina"
        assert candidate["email"] == "amina@example.com"
        assert candidate["country"] == "Kenya"
        assert candidate["profile"]["skills"] == ["React", "Node"]
        assert candidate["profile"]["desiredSalary"] == 50000
        assert "portfolio" not in candidate["profile"]
        assert "password" not in candidate
        assert "passwordHash" not in candidate


class TestPagination:
    @pytest.fixture
    def many(self, client):
        ids = []
        for i in range(5):
            user_id, _ = signup(client, f"seeker{i}@example.com")
            ids.append(user_id)
        return ids

    def test_pages(self, client, employer, many):
        first = _search(client, employer, page=1, limit=2).json()
        assert first["total"] == 5
        assert first["totalPages"] == 3
        assert first["page"] == 1
        assert first["limit"] == 2
        assert len(first["jobSeekers"]) == 2

        last = _search(client, employer, page=3, limit=2).json()
        assert len(last["jobSeekers"]) == 1

        seen = set()
        for page in (1, 2, 3):
            seen.update(_ids(_search(client, employer, page=page, limit=2)))
        assert seen == set(many)

    def test_past_the_end(self, client, employer, many):
        r = _search(client, employer, page=9, limit=2).json()
        assert r["jobSeekers"] == []
        assert r["total"] == 5

    def test_page_below_one_is_clamped(self, client, employer, many):
        r = _search(client, employer, page=0, limit=2).json()
        assert r["page"] == 1
        assert len(r["jobSeekers"]) == 2

    def test_limit_is_clamped(self, client, employer, many):
        assert _search(client, employer, limit=1000).json()["limit"] == 100
        r = _search(client, employer, limit=0).json()
        assert r["limit"] == 1
        assert len(r["jobSeekers"]) == 1

    def test_default_limit(self, client, employer, many):
        assert _search(client, employer).json()["limit"] == 10


class TestCandidateDetail:
    def test_detail_includes_portfolio(self, client, employer, seekers):
        save_profile(
            client, seekers["b_token"], seekers["b"],
            portfolio=[{"title": "Brand refresh", "url": "https://brian.example/brand"}],
            resume="https://brian.example/cv.pdf",
        )
        r = client.get(f"{API}/jobseekers/{seekers['b']}", headers=auth(employer))
        assert r.status_code == 200
        profile = r.json()["profile"]
        assert profile["portfolio"][0]["title"] == "Brand refresh"
        assert profile["resume"] == "https://brian.example/cv.pdf"

    def test_unknown_account(self, client, employer):
        r = client.get(f"{API}/jobseekers/nobody", headers=auth(employer))
        assert r.status_code == 404
        assert r.json() == {"error": "Job seeker not found"}

    def test_employer_account_is_not_a_candidate(self, client, employer):
        me = client.get(f"{API}/auth/me", headers=auth(employer)).json()
        r = client.get(f"{API}/jobseekers/{me['id']}", headers=auth(employer))
        assert r.status_code == 404

    def test_seeker_without_profile(self, client, employer, seekers, test_db):
        db = test_db()
        db.query(JobSeekerProfile).filter(JobSeekerProfile.account_id == seekers["a"]).delete()
        db.commit()
        db.close()
        r = client.get(f"{API}/jobseekers/{seekers['a']}", headers=auth(employer))
        assert r.status_code == 404

    def test_seekers_are_denied(self, client, seekers):
        r = client.get(f"{API}/jobseekers/{seekers['b']}", headers=auth(seekers["a_token"]))
        assert r.status_code == 403


class TestSearchInputBounds:
    def test_huge_page_is_an_empty_page(self, client, employer, seekers):
        r = _search(client, employer, page=10**20)
        assert r.status_code == 200
        assert r.json()["jobSeekers"] == []
        assert r.json()["total"] == 2

    @pytest.mark.parametrize("param", ["salaryMin", "salaryMax"])
    def test_salary_beyond_integer_range_rejected(self, client, employer, seekers, param):
        r = _search(client, employer, **{param: 10**20})
        assert r.status_code == 400
        assert "error" in r.json()

    def test_negative_salary_rejected(self, client, employer, seekers):
        assert _search(client, employer, salaryMin=-1).status_code == 400


class TestUnicodeMatching:
    @pytest.fixture
    def emile(self, client):
        user_id, token = signup(client, "emile@example.com", first_name="Émile", last_name="Ndegwa")
        save_profile(
            client, token, user_id,
            skills=["Développement"],
            location="Nyeri",
            experience=[{"title": "Ingénieur", "company": "Société Générale", "startDate": "2021-03"}],
        )
        return user_id

    def test_name_matches_regardless_of_accent_case(self, client, employer, emile):
        assert _ids(_search(client, employer, search="émile")) == [emile]
        assert _ids(_search(client, employer, search="ÉMILE")) == [emile]

    def test_skill_matches_regardless_of_accent_case(self, client, employer, emile):
        assert _ids(_search(client, employer, skills="DÉVELOPPEMENT")) == [emile]

    def test_experience_matches_regardless_of_accent_case(self, client, employer, emile):
        assert _ids(_search(client, employer, search="SOCIÉTÉ")) == [emile]
