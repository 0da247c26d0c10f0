"""
Centralized test data.

Credentials, user records and expected messages shared by the page objects
and tests. Selectors do not belong here; `locator-warden locators` flags
any it finds in this file.
"""

LOGIN_TEST_DATA = {
    "VALID_EMAIL": "admin@test.com",
    "VALID_PASSWORD": "password123",
    "INVALID_EMAIL": "invalid@test.com",
    "INVALID_PASSWORD": "wrongpassword",
    "EMPTY_EMAIL": "",
    "EMPTY_PASSWORD": "",
    "INVALID_EMAIL_FORMAT": "invalid-email",
    "LONG_EMAIL": "a" * 100 + "@example.com",
    "LONG_PASSWORD": "a" * 100,
}

USER_TEST_DATA = {
    "ADMIN_USER": {
        "email": "admin@test.com",
        "password": "password123",
        "name": "Admin User",
        "role": "admin",
    },
    "REGULAR_USER": {
        "email": "user@test.com",
        "password": "password123",
        "name": "Regular User",
        "role": "user",
    },
    "NEW_USER": {
        "email": "newuser@test.com",
        "password": "newpassword123",
        "name": "New User",
        "role": "user",
    },
}

FORM_TEST_DATA = {
    "VALID_NAMES": {
        "FIRST_NAME": "John",
        "LAST_NAME": "Doe",
        "FULL_NAME": "John Doe",
    },
    "VALID_PHONES": {
        "US_PHONE": "+1-555-123-4567",
        "INTERNATIONAL_PHONE": "+44-20-7946-0958",
    },
}

ERROR_MESSAGES = {
    "LOGIN": {
        "INVALID_CREDENTIALS": "Invalid email or password",
        "EMAIL_REQUIRED": "Email is required",
        "PASSWORD_REQUIRED": "Password is required",
        "INVALID_EMAIL_FORMAT": "Please enter a valid email address",
        "BLOCKED_USER": "Usuario bloqueado después de 3 intentos fallidos",
    },
    "REGISTRATION": {
        "EMAIL_ALREADY_EXISTS": "Email already exists",
        "WEAK_PASSWORD": "Password must be at least 8 characters",
        "PASSWORDS_DONT_MATCH": "Passwords do not match",
    },
    "VALIDATION": {
        "REQUIRED_FIELD": "This field is required",
        "INVALID_FORMAT": "Invalid format",
        "TOO_LONG": "Value is too long",
        "TOO_SHORT": "Value is too short",
    },
}

SUCCESS_MESSAGES = {
    "LOGIN": "Login successful",
    "REGISTRATION": "Registration successful",
    "PROFILE_UPDATE": "Profile updated successfully",
    "PASSWORD_CHANGE": "Password changed successfully",
}

PAGE_TITLES = {
    "DASHBOARD": "UI Automation Practice App",
}
