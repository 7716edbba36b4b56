"""
Create the first admin account.

Usage: python create_admin.py --name Admin --email admin@example.com --contact 9876543210 --password admin123
"""
import argparse
import logging

from sqlalchemy.orm import Session

from hostelcare import models
from hostelcare.config import get_settings
from hostelcare.database import Base, SessionLocal, engine
from hostelcare.deps import get_password_hash, get_user_by_email
from hostelcare.logging_config import setup_logging

logger = logging.getLogger("hostelcare.create_admin")


def create_admin(db: Session, name: str, email: str, contact: str, password: str):
    """Create an admin unless the email is already taken. Returns (user, created)."""
    existing = get_user_by_email(db, email)
    if existing:
        return existing, False

    admin = models.User(
        name=name,
        email=email,
        contact=contact,
        hashed_password=get_password_hash(password),
        role="admin",
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin, True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create a HostelCare admin account")
    parser.add_argument("--name", default="Admin")
    parser.add_argument("--email", required=True)
    parser.add_argument("--contact", required=True)
    parser.add_argument("--password", required=True)
    args = parser.parse_args(argv)

    setup_logging(get_settings().log_level)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        user, created = create_admin(db, args.name, args.email, args.contact, args.password)
    finally:
        db.close()

    if created:
        logger.info("Admin account %s created", user.email)
    else:
        logger.warning("An account with email %s already exists", user.email)


if __name__ == "__main__":
    main()
