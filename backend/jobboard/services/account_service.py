import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.database import utcnow
from jobboard.errors import Conflict, NotFound, Unauthenticated, ValidationError
from jobboard.models.account import Account
from jobboard.models.enums import Role
from jobboard.models.profile import EmployerProfile, JobSeekerProfile
from jobboard.schemas.auth import RegisterRequest
from jobboard.utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("email", "password", "user_type", "first_name", "last_name", "country")
JOBSEEKER_COUNTRY = "kenya"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_registration(req: RegisterRequest) -> None:
    for field in REQUIRED_FIELDS:
        value = getattr(req, field)
        if value is None or not value.strip():
            raise ValidationError("Missing required fields")
    if req.user_type not in {r.value for r in Role}:
        raise ValidationError("Invalid user type")
    # Checked once here; the country is never re-validated afterwards.
    if req.user_type == Role.JOBSEEKER.value and req.country.strip().lower() != JOBSEEKER_COUNTRY:
        raise ValidationError("Job seekers must be from Kenya")


def register(db: Session, req: RegisterRequest) -> Account:
    validate_registration(req)
    email = normalize_email(req.email)

    if db.query(Account).filter(Account.email == email).first():
        raise Conflict("User with this email already exists")

    now = utcnow()
    account = Account(
        id=str(uuid.uuid4()),
        email=email,
        password_hash=hash_password(req.password),
        role=req.user_type,
        first_name=req.first_name.strip(),
        last_name=req.last_name.strip(),
        country=req.country.strip(),
        created_at=now,
        updated_at=now,
    )
    db.add(account)

    if account.role == Role.JOBSEEKER.value:
        db.add(JobSeekerProfile(
            id=str(uuid.uuid4()),
            account_id=account.id,
            location=req.location or settings.default_jobseeker_location,
            currency="USD",
            availability="immediate",
            created_at=now,
            updated_at=now,
        ))
    else:
        db.add(EmployerProfile(
            id=str(uuid.uuid4()),
            account_id=account.id,
            company_name=req.company_name or "",
            location=req.location or account.country,
            created_at=now,
            updated_at=now,
        ))

    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent registration for the same email
        db.rollback()
        raise Conflict("User with this email already exists") from None
    db.refresh(account)
    logger.info("Registered %s account %s", account.role, account.id)
    return account


def authenticate(db: Session, email: str, password: str) -> Account:
    account = db.query(Account).filter(Account.email == normalize_email(email)).first()
    if not account or not verify_password(account.password_hash, password):
        raise Unauthenticated("Invalid email or password")
    return account


def get_account(db: Session, account_id: str) -> Account:
    account = db.query(Account).filter(Account.id == account_id).first()
    if not account:
        raise NotFound("User not found")
    return account
