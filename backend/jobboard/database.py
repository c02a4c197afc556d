import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from jobboard.config import settings


class Base(DeclarativeBase):
    pass


# Largest value an SQLite INTEGER column or bound parameter can hold.
SQLITE_INT_MAX = 2**63 - 1


def _casefold(value):
    return value.casefold() if isinstance(value, str) else value


def configure_connection(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # SQLite lower() only folds ASCII; text search goes through casefold() instead.
    dbapi_conn.create_function("casefold", 1, _casefold, deterministic=True)


def get_engine(db_path: Path | None = None):
    path = db_path or settings.db_path
    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", configure_connection)
    return engine


engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def utcnow() -> str:
    # Microseconds keep "newest first" orderings stable within a single second.
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


SCHEMA_SQL = """\
-- ============================================================
-- ACCOUNTS
-- ============================================================
CREATE TABLE IF NOT EXISTS accounts (
    id            TEXT PRIMARY KEY,
    email         TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    role          TEXT NOT NULL CHECK(role IN ('jobseeker','employer')),
    first_name    TEXT NOT NULL,
    last_name     TEXT NOT NULL,
    country       TEXT NOT NULL,
    created_at    TEXT NOT NULL,
    updated_at    TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_accounts_role ON accounts(role);

-- ============================================================
-- JOB SEEKER PROFILES
-- ============================================================
CREATE TABLE IF NOT EXISTS jobseeker_profiles (
    id                TEXT PRIMARY KEY,
    account_id        TEXT NOT NULL UNIQUE REFERENCES accounts(id) ON DELETE CASCADE,
    phone             TEXT,
    location          TEXT NOT NULL,
    bio               TEXT,
    photo             TEXT,
    desired_job_title TEXT,
    desired_salary    INTEGER,
    currency          TEXT NOT NULL DEFAULT 'USD',
    availability      TEXT NOT NULL DEFAULT 'immediate'
                      CHECK(availability IN ('immediate','2weeks','1month','not-looking')),
    resume            TEXT,
    linked_in         TEXT,
    github            TEXT,
    website           TEXT,
    created_at        TEXT NOT NULL,
    updated_at        TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_jobseeker_profiles_updated ON jobseeker_profiles(updated_at);

CREATE TABLE IF NOT EXISTS profile_skills (
    id         TEXT PRIMARY KEY,
    profile_id TEXT NOT NULL REFERENCES jobseeker_profiles(id) ON DELETE CASCADE,
    position   INTEGER NOT NULL,
    name       TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_profile_skills_profile ON profile_skills(profile_id);

CREATE TABLE IF NOT EXISTS experiences (
    id          TEXT PRIMARY KEY,
    profile_id  TEXT NOT NULL REFERENCES jobseeker_profiles(id) ON DELETE CASCADE,
    position    INTEGER NOT NULL,
    title       TEXT NOT NULL,
    company     TEXT NOT NULL,
    location    TEXT,
    start_date  TEXT NOT NULL,
    end_date    TEXT,
    current     INTEGER NOT NULL DEFAULT 0,
    description TEXT
);

CREATE INDEX IF NOT EXISTS idx_experiences_profile ON experiences(profile_id);

CREATE TABLE IF NOT EXISTS educations (
    id          TEXT PRIMARY KEY,
    profile_id  TEXT NOT NULL REFERENCES jobseeker_profiles(id) ON DELETE CASCADE,
    position    INTEGER NOT NULL,
    degree      TEXT NOT NULL,
    institution TEXT NOT NULL,
    location    TEXT,
    start_date  TEXT NOT NULL,
    end_date    TEXT,
    current     INTEGER NOT NULL DEFAULT 0
);

CREATE INDEX IF NOT EXISTS idx_educations_profile ON educations(profile_id);

CREATE TABLE IF NOT EXISTS portfolio_items (
    id          TEXT PRIMARY KEY,
    profile_id  TEXT NOT NULL REFERENCES jobseeker_profiles(id) ON DELETE CASCADE,
    position    INTEGER NOT NULL,
    title       TEXT NOT NULL,
    description TEXT,
    url         TEXT NOT NULL,
    image       TEXT
);

CREATE INDEX IF NOT EXISTS idx_portfolio_items_profile ON portfolio_items(profile_id);

-- ============================================================
-- EMPLOYER PROFILES
-- ============================================================
CREATE TABLE IF NOT EXISTS employer_profiles (
    id              TEXT PRIMARY KEY,
    account_id      TEXT NOT NULL UNIQUE REFERENCES accounts(id) ON DELETE CASCADE,
    company_name    TEXT NOT NULL DEFAULT '',
    company_website TEXT,
    company_size    TEXT,
    industry        TEXT,
    location        TEXT NOT NULL,
    description     TEXT,
    logo            TEXT,
    created_at      TEXT NOT NULL,
    updated_at      TEXT NOT NULL
);

-- ============================================================
-- JOBS
-- ============================================================
CREATE TABLE IF NOT EXISTS jobs (
    id               TEXT PRIMARY KEY,
    employer_id      TEXT NOT NULL REFERENCES accounts(id) ON DELETE CASCADE,
    title            TEXT NOT NULL,
    description      TEXT NOT NULL,
    requirements     TEXT NOT NULL DEFAULT '[]',
    responsibilities TEXT NOT NULL DEFAULT '[]',
    job_type         TEXT NOT NULL
                     CHECK(job_type IN ('full-time','part-time','contract','freelance')),
    location         TEXT NOT NULL,
    remote           INTEGER NOT NULL DEFAULT 0,
    salary_min       INTEGER,
    salary_max       INTEGER,
    salary_currency  TEXT,
    skills           TEXT NOT NULL DEFAULT '[]',
    experience_level TEXT,
    category         TEXT NOT NULL,
    status           TEXT NOT NULL DEFAULT 'active'
                     CHECK(status IN ('active','closed','draft')),
    views            INTEGER NOT NULL DEFAULT 0,
    applications     INTEGER NOT NULL DEFAULT 0,
    created_at       TEXT NOT NULL,
    updated_at       TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_jobs_employer ON jobs(employer_id);
CREATE INDEX IF NOT EXISTS idx_jobs_status ON jobs(status);
CREATE INDEX IF NOT EXISTS idx_jobs_category ON jobs(category);

-- ============================================================
-- APPLICATIONS
-- ============================================================
CREATE TABLE IF NOT EXISTS applications (
    id            TEXT PRIMARY KEY,
    job_id        TEXT NOT NULL REFERENCES jobs(id) ON DELETE CASCADE,
    job_seeker_id TEXT NOT NULL REFERENCES accounts(id) ON DELETE CASCADE,
    employer_id   TEXT NOT NULL REFERENCES accounts(id) ON DELETE CASCADE,
    cover_letter  TEXT NOT NULL,
    resume        TEXT,
    status        TEXT NOT NULL DEFAULT 'pending'
                  CHECK(status IN ('pending','reviewed','shortlisted','rejected','accepted')),
    notes         TEXT,
    created_at    TEXT NOT NULL,
    updated_at    TEXT NOT NULL
);

CREATE UNIQUE INDEX IF NOT EXISTS idx_applications_job_seeker ON applications(job_id, job_seeker_id);
CREATE INDEX IF NOT EXISTS idx_applications_seeker ON applications(job_seeker_id);
CREATE INDEX IF NOT EXISTS idx_applications_employer ON applications(employer_id);

-- ============================================================
-- FTS5
-- ============================================================
CREATE VIRTUAL TABLE IF NOT EXISTS jobs_fts USING fts5(
    title, description,
    content='jobs', content_rowid='rowid'
);
"""

FTS_TRIGGERS_SQL = """\
CREATE TRIGGER IF NOT EXISTS jobs_ai AFTER INSERT ON jobs BEGIN
    INSERT INTO jobs_fts(rowid, title, description)
    VALUES (new.rowid, new.title, new.description);
END;

CREATE TRIGGER IF NOT EXISTS jobs_ad AFTER DELETE ON jobs BEGIN
    INSERT INTO jobs_fts(jobs_fts, rowid, title, description)
    VALUES ('delete', old.rowid, old.title, old.description);
END;

CREATE TRIGGER IF NOT EXISTS jobs_au AFTER UPDATE OF title, description ON jobs BEGIN
    INSERT INTO jobs_fts(jobs_fts, rowid, title, description)
    VALUES ('delete', old.rowid, old.title, old.description);
    INSERT INTO jobs_fts(rowid, title, description)
    VALUES (new.rowid, new.title, new.description);
END;
"""


def init_db(db_path: Path | None = None):
    path = db_path or settings.db_path
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.executescript(SCHEMA_SQL)
    conn.executescript(FTS_TRIGGERS_SQL)
    conn.close()


def integrity_check(db_path: Path | None = None) -> str | None:
    path = db_path or settings.db_path
    conn = sqlite3.connect(str(path))
    try:
        row = conn.execute("PRAGMA integrity_check").fetchone()
    finally:
        conn.close()
    return row[0] if row else None
