"""
Operator-facing texts of the team screen.
"""

FAILURE_TITLE = "Failure"
TEAM_DETAILS_ERROR = "Unable to retrieve team details"

USER_ADDED = "User added to team"
USER_REMOVED = "User removed from team"
ALL_USERS_ADDED = "All users successfully added"
ALL_USERS_REMOVED = "All users successfully removed"

DELETE_TEAM_PROMPT = "Do you want to delete this team? Users in this team will not be deleted."
