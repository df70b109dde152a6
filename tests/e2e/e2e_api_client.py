import requests

DEFAULT_TIMEOUT_SECONDS = 30


class E2EAPIClient:
    """Wrapper for making HTTP requests to the API"""

    def __init__(self, endpoint, headers):
        self.endpoint = endpoint
        self.headers = headers

    def post(self, path, data, headers=None):
        """Make POST request"""
        url = f"{self.endpoint}{path}"
        h = self.headers.copy()
        if headers:
            h.update(headers)
        if isinstance(data, str):
            return requests.post(url, data=data, headers=h, timeout=DEFAULT_TIMEOUT_SECONDS)
        return requests.post(url, json=data, headers=h, timeout=DEFAULT_TIMEOUT_SECONDS)

    def get(self, path, params=None, headers=None):
        """Make GET request"""
        url = f"{self.endpoint}{path}"
        h = self.headers.copy()
        if headers:
            h.update(headers)
        return requests.get(url, params=params, headers=h, timeout=DEFAULT_TIMEOUT_SECONDS)
