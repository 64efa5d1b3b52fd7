from unittest import mock

import requests
from django.test import SimpleTestCase
from requests.cookies import RequestsCookieJar

from editor.client import ResumeApiClient, ResumeApiError


def _response(status_code=200, json_data=None, content=b""):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = content
    response.text = ""
    response.reason = ""
    if json_data is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = json_data
    return response


class ResumeApiClientTests(SimpleTestCase):
    def setUp(self) -> None:
        self.session = mock.Mock(spec=requests.Session)
        self.session.cookies = RequestsCookieJar()
        self.client = ResumeApiClient("http://testserver/", session=self.session, timeout=3)

    def test_list_resumes_builds_url_and_params(self) -> None:
        self.session.request.return_value = _response(json_data=[{"id": 1}])

        resumes = self.client.list_resumes(user_id=7, chronological=True)

        self.assertEqual(resumes, [{"id": 1}])
        self.session.request.assert_called_once_with(
            "GET",
            "http://testserver/api/resume/",
            timeout=3,
            params={"user_id": 7, "ordering": "chronological"},
        )

    def test_update_resume_uses_put(self) -> None:
        self.session.request.return_value = _response(json_data={"id": 4})

        self.client.update_resume(4, {"title": "x"})

        self.session.request.assert_called_once_with(
            "PUT",
            "http://testserver/api/resume/4/",
            timeout=3,
            json={"title": "x"},
            headers={"Referer": "http://testserver/"},
        )

    def test_unsafe_methods_send_csrf_token_from_session_cookie(self) -> None:
        self.session.cookies.set("csrftoken", "tok123")
        self.session.request.return_value = _response(json_data={"palette": "teal"})

        self.client.patch_preferences({"palette": "teal"})

        headers = self.session.request.call_args.kwargs["headers"]
        self.assertEqual(headers["X-CSRFToken"], "tok123")
        self.assertEqual(headers["Referer"], "http://testserver/")

    def test_safe_methods_send_no_csrf_headers(self) -> None:
        self.session.cookies.set("csrftoken", "tok123")
        self.session.request.return_value = _response(json_data={})

        self.client.get_preferences()

        self.assertNotIn("headers", self.session.request.call_args.kwargs)

    def test_login_posts_form_with_csrf_token(self) -> None:
        def fetch_form(url, timeout):
            self.session.cookies.set("csrftoken", "form-token")
            return _response()

        self.session.get.side_effect = fetch_form
        self.session.post.return_value = _response(302)

        self.client.login("ada", "s3cret-pass")

        data = self.session.post.call_args.kwargs["data"]
        self.assertEqual(data["csrfmiddlewaretoken"], "form-token")
        self.assertEqual(data["username"], "ada")
        self.assertFalse(self.session.post.call_args.kwargs["allow_redirects"])

    def test_login_with_bad_credentials(self) -> None:
        self.session.get.return_value = _response()
        self.session.post.return_value = _response(200)

        with self.assertRaises(ResumeApiError) as ctx:
            self.client.login("ada", "wrong")

        self.assertEqual(ctx.exception.status_code, 200)

    def test_error_message_from_response_body(self) -> None:
        self.session.request.return_value = _response(400, {"error": "bad item"})

        with self.assertRaises(ResumeApiError) as ctx:
            self.client.create_resume({})

        self.assertEqual(ctx.exception.message, "bad item")
        self.assertEqual(ctx.exception.status_code, 400)

    def test_field_errors_are_joined(self) -> None:
        self.session.request.return_value = _response(400, {"palette": ["not valid"]})

        with self.assertRaises(ResumeApiError) as ctx:
            self.client.patch_preferences({"palette": "nope"})

        self.assertIn("palette", ctx.exception.message)

    def test_transport_error(self) -> None:
        self.session.request.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(ResumeApiError) as ctx:
            self.client.get_preferences()

        self.assertIsNone(ctx.exception.status_code)

    def test_download_export_returns_bytes_and_drops_empty_params(self) -> None:
        self.session.request.return_value = _response(content=b"%PDF-1.4")

        content = self.client.download_export("pdf", template="classic", palette=None, logo="")

        self.assertEqual(content, b"%PDF-1.4")
        self.session.request.assert_called_once_with(
            "GET",
            "http://testserver/api/export/resume/pdf/",
            timeout=3,
            params={"template": "classic"},
        )

    def test_download_export_rejects_unknown_kind(self) -> None:
        with self.assertRaises(ValueError):
            self.client.download_export("gif")
