"""
Tests for the user request builders.
"""

from unittest.mock import patch

import pytest

from iam_client.client import IamClient
from iam_client.client_types import RequestDescriptor
from iam_client.resources.users import UserBuilder, UsersBuilder
from iam_client.types.common import IamResponse


def ok(data=None, headers=None) -> IamResponse:
    return IamResponse(status_code=200, headers=headers or {}, data=data)


@pytest.fixture
def client():
    c = IamClient(access_token="token")
    try:
        yield c
    finally:
        c.close()


def sent(mock_send) -> RequestDescriptor:
    mock_send.assert_called_once()
    (request,), _ = mock_send.call_args
    return request


# ---------------------------------------------------------------------------
# Builder selection
# ---------------------------------------------------------------------------


def test_user_with_id_returns_single_resource_builder(client) -> None:
    builder = client.user("u1")
    assert isinstance(builder, UserBuilder)
    assert builder.id == "u1"
    for name in ("get", "update", "delete"):
        assert callable(getattr(builder, name))


@pytest.mark.parametrize("identifier", [None, ""])
def test_user_without_id_returns_collection_builder(client, identifier) -> None:
    builder = client.user(identifier)
    assert isinstance(builder, UsersBuilder)
    assert callable(builder.create)
    assert callable(builder.get)


# ---------------------------------------------------------------------------
# Single-resource builder
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "call, method, path",
    [
        (lambda b: b.get(), "GET", "/user/u1"),
        (lambda b: b.delete(), "DELETE", "/user/u1"),
        (lambda b: b.sign_out(), "PUT", "/user/u1/signout"),
        (lambda b: b.disconnect(), "PUT", "/user/u1/disconnect"),
        (lambda b: b.get_identities(), "GET", "/user/u1/identity"),
        (lambda b: b.get_device("d1"), "GET", "/user/u1/devices/d1"),
        (lambda b: b.get_devices(), "GET", "/user/u1/devices/"),
        (lambda b: b.delete_device("d1"), "DELETE", "/user/u1/devices/d1"),
        (lambda b: b.get_profile(), "GET", "/user/u1/profile"),
    ],
)
@patch("iam_client.client.IamClient.send")
def test_user_requests_without_body(mock_send, client, call, method, path) -> None:
    mock_send.return_value = ok({"id": "u1"})

    result = call(client.user("u1"))

    request = sent(mock_send)
    assert request.method == method
    assert request.path == path
    assert request.query is None
    assert request.data is None
    assert request.with_auth is True
    assert result.data == {"id": "u1"}


@patch("iam_client.client.IamClient.send")
def test_update_sends_data(mock_send, client) -> None:
    mock_send.return_value = ok()

    client.user("u1").update({"firstName": "Ann"})

    request = sent(mock_send)
    assert request.method == "PUT"
    assert request.path == "/user/u1"
    assert request.data == {"firstName": "Ann"}


@patch("iam_client.client.IamClient.send")
def test_me_alias(mock_send, client) -> None:
    mock_send.return_value = ok()

    client.user("me").sign_out()

    assert sent(mock_send).path == "/user/me/signout"


@patch("iam_client.client.IamClient.send")
def test_ids_are_encoded_as_one_segment(mock_send, client) -> None:
    mock_send.return_value = ok()

    client.user("a/b").get_device("dev 1")

    assert sent(mock_send).path == "/user/a%2Fb/devices/dev%201"


@patch("iam_client.client.IamClient.send")
def test_add_identity(mock_send, client) -> None:
    mock_send.return_value = ok()
    identity = {"oAuthService": "google", "oAuthId": "123"}

    client.user("u1").add_identity(identity)

    request = sent(mock_send)
    assert request.method == "POST"
    assert request.path == "/user/u1/identity"
    assert request.data == identity


@pytest.mark.parametrize("identity", [None, {}])
@patch("iam_client.client.IamClient.send")
def test_add_identity_requires_value(mock_send, client, identity) -> None:
    with pytest.raises(ValueError, match="Missing identity"):
        client.user("u1").add_identity(identity)
    mock_send.assert_not_called()


@patch("iam_client.client.IamClient.send")
def test_register_device_returns_location_id(mock_send, client) -> None:
    mock_send.return_value = IamResponse(
        status_code=201,
        headers={"location": "https://iam.test/v1.0/user/u1/devices/device-42"},
        data={"ignored": True},
    )
    device = {"URI": "token", "name": "phone", "type": "Android"}

    result = client.user("u1").register_device(device)

    request = sent(mock_send)
    assert request.method == "PUT"
    assert request.path == "/user/u1/devices"
    assert request.data == device
    assert result.data == "device-42"


# ---------------------------------------------------------------------------
# Collection builder
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("params", [None, {}])
@pytest.mark.parametrize(
    "operation, path",
    [("get", "/user"), ("get_profiles", "/user/profile")],
)
@patch("iam_client.client.IamClient.send")
def test_list_without_params_omits_query(mock_send, client, operation, path, params) -> None:
    mock_send.return_value = ok([])

    getattr(client.user(), operation)(params)

    request = sent(mock_send)
    assert request.method == "GET"
    assert request.path == path
    assert request.query is None


@patch("iam_client.client.IamClient.send")
def test_list_serializes_params(mock_send, client) -> None:
    mock_send.return_value = ok([])

    client.user().get({"a": 1, "b": 2})

    query = sent(mock_send).query
    assert "a=1" in query
    assert "b=2" in query


@patch("iam_client.client.IamClient.send")
def test_create_returns_location_id(mock_send, client) -> None:
    mock_send.return_value = IamResponse(
        status_code=201,
        headers={"location": "https://iam.test/v1.0/user/new-user"},
        data=None,
    )

    result = client.user().create({"username": "alice"})

    request = sent(mock_send)
    assert request.method == "POST"
    assert request.path == "/user"
    assert request.data == {"username": "alice"}
    assert result.data == "new-user"


@patch("iam_client.client.IamClient.send")
def test_create_without_location_sets_none(mock_send, client) -> None:
    mock_send.return_value = ok({"raw": "body"})

    result = client.user().create({"username": "alice"})

    assert result.data is None


@patch("iam_client.client.IamClient.send")
def test_send_reset_password_email(mock_send, client) -> None:
    mock_send.return_value = ok()

    client.user().send_reset_password_email("x@y.com")

    request = sent(mock_send)
    assert request.method == "GET"
    assert request.path == "/user/resetPassword"
    assert request.query == "email=x@y.com"
    assert request.data is None


@patch("iam_client.client.IamClient.send")
def test_get_profiles(mock_send, client) -> None:
    mock_send.return_value = ok([])

    client.user().get_profiles({"pagination": {"page": 1, "page_size": 20}})

    request = sent(mock_send)
    assert request.method == "GET"
    assert request.path == "/user/profile"
    assert request.query == "api:page=1&api:pageSize=20"


@patch("iam_client.client.IamClient.send")
def test_domain_scoped_paths(mock_send) -> None:
    mock_send.return_value = ok()

    with IamClient(access_token="token", domain="acme") as client:
        client.user().get_profiles()
        client.user("u1").get_profile()

    paths = [call.args[0].path for call in mock_send.call_args_list]
    assert paths == ["/acme/user/profile", "/acme/user/u1/profile"]


def test_builders_accept_any_requester() -> None:
    class Recorder:
        def __init__(self) -> None:
            self.requests: list[RequestDescriptor] = []

        def send(self, request: RequestDescriptor) -> IamResponse:
            self.requests.append(request)
            return ok()

    recorder = Recorder()
    UserBuilder(recorder, "u1").get()
    UsersBuilder(recorder).get()

    assert [r.path for r in recorder.requests] == ["/user/u1", "/user"]
