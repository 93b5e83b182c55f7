"""
University demo data set.

Loaded on startup when SEED_DEMO_DATA is enabled and the users table is
empty, or on demand through seed_demo_data.py. The evaluation totals are
written through the evaluation scorer, so they always follow the weighting
formula (e.g. exam 85 / interview 0 -> 42.5).
"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from app.core.security import get_password_hash
from app.models.applicant import Applicant
from app.models.application import Application, ApplicationStatus
from app.models.evaluation import Evaluation
from app.models.status_event import StatusEvent
from app.models.user import User, UserRole
from app.models.vacancy import Department, JobVacancy, VacancyStatus
from app.services.evaluation_scorer import compute_total

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEPARTMENTS = {
    "d1": "College of Engineering",
    "d2": "College of Education",
    "d3": "College of Science and Mathematics",
    "d4": "College of Business Administration",
    "d5": "College of Nursing",
    "d6": "Human Resource Office",
    "d7": "College of Information Technology",
    "d8": "College of Law",
}

USERS = [
    ("admin@wmsu.edu.ph", "Maria Santos", UserRole.ADMIN),
    ("hrstaff@wmsu.edu.ph", "Juan Dela Cruz", UserRole.STAFF),
]

VACANCIES = {
    "v1": ("Instructor I", "d1", 12, "Bachelor's degree in Engineering, LET passer preferred", date(2026, 1, 15), date(2026, 2, 28), VacancyStatus.OPEN),
    "v2": ("Professor III", "d2", 20, "PhD in Education, 5+ years teaching experience", date(2026, 1, 10), date(2026, 2, 15), VacancyStatus.CLOSED),
    "v3": ("Administrative Aide IV", "d6", 4, "College graduate, computer literate", date(2026, 2, 1), date(2026, 3, 15), VacancyStatus.OPEN),
    "v4": ("IT Officer II", "d7", 15, "BS in IT/CS, 3 years relevant experience", date(2026, 1, 20), date(2026, 2, 20), VacancyStatus.FILLED),
    "v5": ("Nurse II", "d5", 15, "BSN, valid PRC license, 2 years hospital experience", date(2026, 2, 5), date(2026, 3, 5), VacancyStatus.OPEN),
}

APPLICANTS = {
    "a1": ("Ana Marie Reyes", "09171234567", "ana.reyes@gmail.com", "BS Civil Engineering - WMSU", "2 years at DPWH"),
    "a2": ("Roberto Garcia", "09189876543", "roberto.garcia@yahoo.com", "PhD Education - UP Diliman", "8 years teaching at MSU"),
    "a3": ("Christine Lim", "09201112233", "christine.lim@gmail.com", "BS Computer Science - AdZU", "4 years as Software Developer"),
    "a4": ("Mark Anthony Cruz", "09175556677", "mark.cruz@gmail.com", "AB Political Science - WMSU", "1 year admin assistant"),
    "a5": ("Fatima Abdullah", "09162223344", "fatima.a@gmail.com", "BSN - WMSU", "3 years at Zamboanga City Medical Center"),
    "a6": ("Jose Mendoza", "09183334455", "jose.mendoza@gmail.com", "BS Electrical Engineering - WMSU", "1 year intern at ZAMCELCO"),
    "a7": ("Liza Mae Torres", "09194445566", "liza.torres@gmail.com", "BS Information Technology - WMSU", "2 years IT Support"),
}

APPLICATIONS = {
    "app1": ("a1", "v1", ApplicationStatus.FOR_INTERVIEW, date(2026, 1, 20), "Strong technical background"),
    "app2": ("a2", "v2", ApplicationStatus.HIRED, date(2026, 1, 12), "Exceptional qualifications"),
    "app3": ("a3", "v4", ApplicationStatus.HIRED, date(2026, 1, 22), "Best fit for the role"),
    "app4": ("a4", "v3", ApplicationStatus.UNDER_INITIAL_SCREENING, date(2026, 2, 5), None),
    "app5": ("a5", "v5", ApplicationStatus.FOR_EXAMINATION, date(2026, 2, 8), None),
    "app6": ("a6", "v1", ApplicationStatus.APPLICATION_RECEIVED, date(2026, 2, 10), None),
    "app7": ("a7", "v4", ApplicationStatus.REJECTED, date(2026, 1, 25), "Did not meet minimum requirements"),
    "app8": ("a1", "v3", ApplicationStatus.FOR_FINAL_EVALUATION, date(2026, 2, 3), None),
}

STATUS_HISTORY = [
    ("app1", ApplicationStatus.APPLICATION_RECEIVED, "Documents complete", "Juan Dela Cruz", date(2026, 1, 20)),
    ("app1", ApplicationStatus.UNDER_INITIAL_SCREENING, "Qualifications verified", "Juan Dela Cruz", date(2026, 1, 25)),
    ("app1", ApplicationStatus.FOR_EXAMINATION, "Scheduled for Jan 30", "Juan Dela Cruz", date(2026, 1, 28)),
    ("app1", ApplicationStatus.FOR_INTERVIEW, "Passed examination", "Maria Santos", date(2026, 2, 2)),
    ("app2", ApplicationStatus.APPLICATION_RECEIVED, "", "Juan Dela Cruz", date(2026, 1, 12)),
    ("app2", ApplicationStatus.HIRED, "Board approved", "Maria Santos", date(2026, 2, 10)),
]

EVALUATIONS = [
    ("app1", 88, 92, "Excellent candidate", "Maria Santos", date(2026, 2, 2)),
    ("app2", 95, 97, "Outstanding", "Maria Santos", date(2026, 2, 8)),
    ("app3", 90, 88, "Very good technical skills", "Maria Santos", date(2026, 2, 5)),
    ("app5", 85, 0, "Pending interview", "Juan Dela Cruz", date(2026, 2, 12)),
]


def seed_if_empty(db: Session) -> bool:
    """
    Insert the demo data set unless users already exist.

    Returns:
        True if data was inserted, False if the database was not empty
    """
    if db.query(User.id).first() is not None:
        logger.info("Users table not empty, skipping demo data")
        return False

    password_hash = get_password_hash(DEMO_PASSWORD)
    for email, name, role in USERS:
        db.add(User(email=email, name=name, role=role, hashed_password=password_hash))

    departments = {key: Department(name=name) for key, name in DEPARTMENTS.items()}
    db.add_all(departments.values())

    vacancies = {}
    for key, (title, dept, grade, quals, posted, closing, status) in VACANCIES.items():
        vacancies[key] = JobVacancy(
            position_title=title,
            department=departments[dept],
            salary_grade=grade,
            qualifications=quals,
            posting_date=posted,
            closing_date=closing,
            status=status,
        )
    db.add_all(vacancies.values())

    applicants = {}
    for key, (name, phone, email, education, experience) in APPLICANTS.items():
        applicants[key] = Applicant(
            full_name=name,
            contact_number=phone,
            email=email,
            address="Zamboanga City",
            educational_background=education,
            work_experience=experience,
        )
    db.add_all(applicants.values())

    applications = {}
    for key, (applicant, vacancy, status, applied, remarks) in APPLICATIONS.items():
        applications[key] = Application(
            applicant=applicants[applicant],
            vacancy=vacancies[vacancy],
            status=status,
            date_applied=applied,
            remarks=remarks,
        )
    db.add_all(applications.values())

    # Flush in timeline order so same-day ties keep insertion order
    for application, status, remarks, actor, when in STATUS_HISTORY:
        db.add(StatusEvent(
            application=applications[application],
            status=status,
            remarks=remarks,
            updated_by=actor,
            updated_at=when,
        ))
        db.flush()

    for application, exam, interview, remarks, evaluator, when in EVALUATIONS:
        db.add(Evaluation(
            application=applications[application],
            exam_score=float(exam),
            interview_score=float(interview),
            total_score=compute_total(exam, interview),
            remarks=remarks,
            evaluated_by=evaluator,
            evaluated_at=when,
        ))

    db.commit()
    logger.info(
        f"Seeded demo data: {len(USERS)} users, {len(DEPARTMENTS)} departments, "
        f"{len(VACANCIES)} vacancies, {len(APPLICANTS)} applicants, {len(APPLICATIONS)} applications"
    )
    return True
