"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- HR accounts and their auth headers
- A department, vacancy, applicant and application to work with
"""

import os
from datetime import date

# Keep the app engine off PostgreSQL; tests use their own engine below
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.models import (
    Applicant,
    Application,
    ApplicationStatus,
    Department,
    JobVacancy,
    User,
    UserRole,
    VacancyStatus,
)
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "password123"


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def make_user(db, email, name, role=UserRole.STAFF, is_active=True):
    user = User(
        email=email,
        name=name,
        role=role,
        hashed_password=get_password_hash(TEST_PASSWORD),
        is_active=is_active,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers_for(user):
    token = create_access_token(data={"sub": str(user.id), "name": user.name, "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def staff_user(db_session):
    return make_user(db_session, "hrstaff@example.edu", "Juan Dela Cruz")


@pytest.fixture
def admin_user(db_session):
    return make_user(db_session, "admin@example.edu", "Maria Santos", role=UserRole.ADMIN)


@pytest.fixture
def staff_headers(staff_user):
    return auth_headers_for(staff_user)


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers_for(admin_user)


@pytest.fixture
def department(db_session):
    dept = Department(name="College of Engineering")
    db_session.add(dept)
    db_session.commit()
    db_session.refresh(dept)
    return dept


@pytest.fixture
def vacancy(db_session, department):
    job = JobVacancy(
        position_title="Instructor I",
        department_id=department.id,
        salary_grade=12,
        qualifications="Bachelor's degree in Engineering",
        posting_date=date(2026, 1, 15),
        closing_date=date(2026, 2, 28),
        status=VacancyStatus.OPEN,
    )
    db_session.add(job)
    db_session.commit()
    db_session.refresh(job)
    return job


def make_applicant(db, full_name, email=None):
    applicant = Applicant(
        full_name=full_name,
        contact_number="09171234567",
        email=email or f"{full_name.split()[0].lower()}@example.com",
        address="Zamboanga City",
        educational_background="BS Civil Engineering",
        work_experience="2 years at DPWH",
    )
    db.add(applicant)
    db.commit()
    db.refresh(applicant)
    return applicant


def make_application(db, applicant, vacancy, status=ApplicationStatus.APPLICATION_RECEIVED, date_applied=None):
    application = Application(
        applicant_id=applicant.id,
        vacancy_id=vacancy.id,
        status=status,
        date_applied=date_applied or date(2026, 1, 20),
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


@pytest.fixture
def applicant(db_session):
    return make_applicant(db_session, "Ana Marie Reyes")


@pytest.fixture
def application(db_session, applicant, vacancy):
    return make_application(db_session, applicant, vacancy)


@pytest.fixture
def sample_vacancy_data(department):
    """Vacancy payload as the dashboard sends it (camelCase)"""
    return {
        "positionTitle": "Professor III",
        "departmentId": department.id,
        "salaryGrade": 20,
        "qualifications": "PhD in Education, 5+ years teaching experience",
        "postingDate": "2026-01-10",
        "closingDate": "2026-02-15",
        "status": "Open",
    }


@pytest.fixture
def sample_applicant_data():
    return {
        "fullName": "Christine Lim",
        "contactNumber": "09201112233",
        "email": "christine.lim@example.com",
        "address": "Zamboanga City",
        "educationalBackground": "BS Computer Science",
        "workExperience": "4 years as Software Developer",
    }


@pytest.fixture
def user_factory(db_session):
    def factory(email, name, role=UserRole.STAFF, is_active=True):
        return make_user(db_session, email, name, role=role, is_active=is_active)
    return factory


@pytest.fixture
def applicant_factory(db_session):
    def factory(full_name, email=None):
        return make_applicant(db_session, full_name, email=email)
    return factory


@pytest.fixture
def application_factory(db_session):
    def factory(applicant, vacancy, status=ApplicationStatus.APPLICATION_RECEIVED, date_applied=None):
        return make_application(db_session, applicant, vacancy, status=status, date_applied=date_applied)
    return factory


@pytest.fixture
def headers_for():
    return auth_headers_for
