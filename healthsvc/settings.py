HOST = "127.0.0.1"
PORT = 3000

API_PREFIX = "/api/v1"
HEALTHCHECK_PATH = f"{API_PREFIX}/healthcheck"
