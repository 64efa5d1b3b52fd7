"""
HTTP client for the devprofile API.

Thin wrapper over a ``requests.Session``. Every failure, transport or HTTP,
surfaces as ``ResumeApiError``. With session authentication, unsafe requests
carry the ``csrftoken`` cookie back as ``X-CSRFToken``.
"""
import logging
from typing import Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

SAFE_METHODS = ('GET', 'HEAD', 'OPTIONS')
LOGIN_PATH = '/api-auth/login/'

EXPORT_PATHS = {
    'pdf': 'export/resume/pdf/',
    'docx': 'export/resume/docx/',
    'png': 'export/banner/',
}


class ResumeApiError(Exception):
    """
    API call failed. ``status_code`` is None for transport errors.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ResumeApiClient:
    """
    Client for resume, preference and export endpoints.

    Args:
        base_url: Server root, e.g. ``http://localhost:8000``
        session: Optional pre-authenticated ``requests.Session``
        timeout: Per-request timeout in seconds
    """

    csrf_cookie_name = 'csrftoken'

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/{path.lstrip('/')}"

    def _csrf_headers(self) -> Dict[str, str]:
        headers = {'Referer': self.base_url + '/'}
        token = self.session.cookies.get(self.csrf_cookie_name)
        if token:
            headers['X-CSRFToken'] = token
        return headers

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self._url(path)
        if method.upper() not in SAFE_METHODS:
            kwargs['headers'] = {**self._csrf_headers(), **kwargs.get('headers', {})}
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ResumeApiError(f"Network error: {exc}") from exc

        if not response.ok:
            message = self._error_message(response)
            logger.warning("%s %s returned %s: %s", method, url, response.status_code, message)
            raise ResumeApiError(message, response.status_code)
        return response

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason or f"HTTP {response.status_code}"

        if isinstance(body, dict):
            for key in ('error', 'detail'):
                if key in body:
                    return str(body[key])
            return '; '.join(f"{field}: {errors}" for field, errors in body.items())
        return str(body)

    def login(self, username: str, password: str) -> None:
        """
        Open a Django session through the browsable API login form.

        Raises:
            ResumeApiError: Bad credentials or an unreachable server.
        """
        url = self.base_url + LOGIN_PATH
        try:
            self.session.get(url, timeout=self.timeout)
            response = self.session.post(
                url,
                data={
                    'username': username,
                    'password': password,
                    'csrfmiddlewaretoken': self.session.cookies.get(self.csrf_cookie_name, ''),
                },
                headers={'Referer': url},
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as exc:
            logger.warning("Login for %s failed: %s", username, exc)
            raise ResumeApiError(f"Network error: {exc}") from exc

        # The login view redirects on success and re-renders the form otherwise.
        if response.status_code != 302:
            logger.warning("Login for %s rejected (%s)", username, response.status_code)
            raise ResumeApiError("Invalid username or password", response.status_code)
        logger.info("Logged in as %s", username)

    # Resumes

    def list_resumes(self, user_id: Optional[int] = None, chronological: bool = False) -> List[Dict]:
        params = {}
        if user_id is not None:
            params['user_id'] = user_id
        if chronological:
            params['ordering'] = 'chronological'
        return self._request('GET', 'resume/', params=params).json()

    def create_resume(self, snapshot: Dict) -> Dict:
        return self._request('POST', 'resume/', json=snapshot).json()

    def update_resume(self, resume_id: int, snapshot: Dict) -> Dict:
        return self._request('PUT', f'resume/{resume_id}/', json=snapshot).json()

    def delete_resume(self, resume_id: int) -> None:
        self._request('DELETE', f'resume/{resume_id}/')

    # Preferences

    def get_preferences(self, full: bool = False) -> Dict:
        path = 'user/preferences/full/' if full else 'user/preferences/'
        return self._request('GET', path).json()

    def patch_preferences(self, changes: Dict, full: bool = False) -> Dict:
        path = 'user/preferences/full/' if full else 'user/preferences/'
        return self._request('PATCH', path, json=changes).json()

    # Exports

    def download_export(self, kind: str = 'pdf', **params) -> bytes:
        """
        Download an export as bytes.

        ``params`` are passed as query parameters (``template``, ``palette``,
        ``language``, ``bannerColor``, ``logo``).
        """
        try:
            path = EXPORT_PATHS[kind]
        except KeyError:
            raise ValueError(f"Unknown export kind: {kind}")
        query = {key: value for key, value in params.items() if value not in (None, '')}
        return self._request('GET', path, params=query).content
