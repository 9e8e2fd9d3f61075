# tests/conftest.py
"""
Shared fixtures: minimal valid records in wire form (camelCase keys).

Each fixture returns a fresh dict so tests can mutate it freely.
"""

from __future__ import annotations

import copy

import pytest

SCHOOL_ID = "2f6c1a7e-3b7d-4c1e-9a55-0d9f6b1e2a01"
STAFF_ID = "7d1e4c2a-8b3f-4a6d-b1c9-5e2f0a7d3b12"
STUDENT_ID = "c3a9e5f1-2d4b-4e8a-9f6c-1b7d3e5a9c23"
USER_ID = "a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d"
YEAR_ID = "e4d3c2b1-a0f9-4e8d-b7c6-5a4b3c2d1e0f"
ROLE_ID = "0b1c2d3e-4f5a-4b6c-8d7e-9f0a1b2c3d4e"
ROLE_ID_2 = "1c2d3e4f-5a6b-4c7d-8e9f-0a1b2c3d4e5f"
BUDGET_ID = "5e6f7a8b-9c0d-4e1f-a2b3-c4d5e6f7a8b9"

ADDRESS = {
    "street": "1 School Lane",
    "city": "Springfield",
    "state": "IL",
    "country": "US",
    "postalCode": "62701",
    "timezone": "America/Chicago",
}

STAFF = {
    "staffId": STAFF_ID,
    "employeeNumber": "EMP-001",
    "firstName": "Ada",
    "lastName": "Okafor",
    "contactInfo": {"email": "ada.okafor@springfieldschools.org", "phone": "+15550123"},
    "employment": {"hireDate": "2019-08-15", "employmentType": "full_time", "status": "active"},
    "roles": [
        {
            "roleId": ROLE_ID,
            "roleType": "teacher",
            "schoolId": SCHOOL_ID,
            "startDate": "2019-08-15",
            "isPrimary": True,
            "subjects": ["Mathematics"],
            "gradeLevels": ["7", "8"],
        }
    ],
}

STUDENT = {
    "studentId": STUDENT_ID,
    "firstName": "Lena",
    "lastName": "Marsh",
    "dateOfBirth": "2011-04-02",
    "gender": "female",
    "grade": "7",
    "academicYear": "2024-2025",
    "enrollmentDate": "2023-09-01",
    "status": "active",
    "overallGPA": 3.4,
    "address": ADDRESS,
    "lastUpdated": "2024-10-01",
    "createdAt": "2023-09-01",
    "updatedBy": USER_ID,
}

SCHOOL = {
    "schoolId": SCHOOL_ID,
    "schoolName": "Springfield Middle",
    "schoolCode": "SMS-01",
    "schoolType": "middle",
    "status": "active",
    "maxStudentCapacity": 800,
    "gradeRange": {"lowestGrade": "6", "highestGrade": "8"},
    "address": ADDRESS,
    "contactInfo": {"email": "office@springfieldschools.org"},
}

BUDGET = {
    "budgetId": BUDGET_ID,
    "schoolId": SCHOOL_ID,
    "academicYearId": YEAR_ID,
    "budgetName": "Operations 2024",
    "budgetType": "operational",
    "fiscalYear": "2024",
    "startDate": "2024-01-01",
    "endDate": "2024-12-31",
    "totalAllocated": 150000,
    "totalSpent": 60000,
    "totalRemaining": 90000,
    "lineItems": [
        {
            "lineItemId": "6f7a8b9c-0d1e-4f2a-b3c4-d5e6f7a8b9c0",
            "budgetId": BUDGET_ID,
            "category": "technology",
            "description": "Laptops",
            "allocatedAmount": 100000,
            "spentAmount": 40000,
            "remainingAmount": 60000,
            "status": "in_progress",
        },
        {
            "lineItemId": "7a8b9c0d-1e2f-4a3b-c4d5-e6f7a8b9c0d1",
            "budgetId": BUDGET_ID,
            "category": "facilities",
            "description": "Roof repair",
            "allocatedAmount": 50000,
            "spentAmount": 20000,
            "remainingAmount": 30000,
            "status": "approved",
        },
    ],
    "status": "active",
}


@pytest.fixture
def address() -> dict:
    return copy.deepcopy(ADDRESS)


@pytest.fixture
def staff_data() -> dict:
    return copy.deepcopy(STAFF)


@pytest.fixture
def student_data() -> dict:
    return copy.deepcopy(STUDENT)


@pytest.fixture
def school_data() -> dict:
    return copy.deepcopy(SCHOOL)


@pytest.fixture
def budget_data() -> dict:
    return copy.deepcopy(BUDGET)


@pytest.fixture
def salary_data() -> dict:
    return {
        "salaryId": "8b9c0d1e-2f3a-4b4c-d5e6-f7a8b9c0d1e2",
        "staffId": STAFF_ID,
        "schoolId": SCHOOL_ID,
        "academicYearId": YEAR_ID,
        "baseSalary": 52000,
        "allowances": [{"allowanceType": "housing", "amount": 3000, "frequency": "annual"}],
        "grossSalary": 55000,
        "netSalary": 46000,
        "effectiveDate": "2024-09-01",
        "paymentFrequency": "monthly",
        "status": "active",
    }
