"""Bearer headers matching the API_KEYS set in the root conftest."""

ADMIN_HEADERS = {"Authorization": "Bearer test-admin-token"}
MEMBER_HEADERS = {"Authorization": "Bearer test-member-token"}
