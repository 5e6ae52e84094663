"""
User role values as stored on the user record.
Administrators manage the console and are never offered as team members.
"""

ADMINISTRATOR = 1
STANDARD_USER = 2

ROLE_NAMES = {
    ADMINISTRATOR: "administrator",
    STANDARD_USER: "user",
}
