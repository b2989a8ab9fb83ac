TEST_SECRET = "test-secret-do-not-use-in-production"
VALID_PASSWORD = "Password123!"
