"""
Keys under which the console remembers the page size of each team table.
"""

TEAM_AVAILABLE_USERS = "team_available_users"
TEAM_MEMBERS = "team_members"
