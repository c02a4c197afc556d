API = "/api"


def auth(token):
    return {"Cookie": f"token={token}"}


def register(client, email, user_type="jobseeker", country="Kenya", **extra):
    body = {
        "email": email,
        "password": "secret-password-1",
        "userType": user_type,
        "firstName": extra.pop("first_name", "Test"),
        "lastName": extra.pop("last_name", "User"),
        "country": country,
        **extra,
    }
    return client.post(f"{API}/auth/register", json=body)


def login(client, email):
    r = client.post(f"{API}/auth/login", json={"email": email, "password": "secret-password-1"})
    assert r.status_code == 200, r.text
    # Requests authenticate explicitly through auth(); keep the jar empty.
    client.cookies.clear()
    return r.json()["id"], r.cookies.get("token")


def signup(client, email, user_type="jobseeker", **extra):
    r = register(client, email, user_type=user_type, **extra)
    assert r.status_code == 201, r.text
    return login(client, email)


def post_job(client, token, **overrides):
    body = {
        "title": "Backend Engineer",
        "description": "Build and run our APIs",
        "type": "full-time",
        "location": "Nairobi",
        "category": "Engineering",
        **overrides,
    }
    r = client.post(f"{API}/jobs", json=body, headers=auth(token))
    assert r.status_code == 201, r.text
    return r.json()


def apply(client, token, job_id, cover_letter="I would love to join."):
    return client.post(
        f"{API}/applications",
        json={"jobId": job_id, "coverLetter": cover_letter, "resume": "https://cv.example/me.pdf"},
        headers=auth(token),
    )


def save_profile(client, token, user_id, **fields):
    r = client.put(f"{API}/profile/jobseeker/{user_id}", json=fields, headers=auth(token))
    assert r.status_code == 200, r.text
    return r.json()
