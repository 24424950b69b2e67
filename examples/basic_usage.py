"""
End-to-end usage sample for the IAM Python SDK.
"""

from iam_client import APIError, IamClient, TransportError, get_local_client_config, get_logger


def main() -> None:
    config = get_local_client_config()
    get_logger(config.logging_format, "DEBUG")

    client = IamClient.from_config(config)
    try:
        me = client.user("me").get()
        print(f"Signed in as: {me.data}")

        user_id = client.user().create(
            {"username": "alice", "email": "alice@example.com", "password": "s3cret"}
        ).data
        print(f"Created user: {user_id}")

        alice = client.user(user_id)
        alice.update({"firstName": "Alice"})
        alice.add_identity({"oAuthService": "silkroad", "oAuthId": user_id})
        print(f"Identities: {alice.get_identities().data}")

        device_id = client.user("me").register_device(
            {"URI": "push-token", "name": "Example phone", "type": "Android"}
        ).data
        print(f"Registered device: {device_id}")
        client.user("me").delete_device(device_id)

        page = client.user().get({"search": "alice", "pagination": {"page": 0, "pageSize": 10}})
        print(f"Search results: {page.data}")

        client.user().send_reset_password_email("alice@example.com")
        alice.delete()
    except APIError as exc:
        print(f"API error: {exc.status_code} {exc.error} {exc.message}")
    except TransportError as exc:
        print(f"Transport error: {exc}")
    finally:
        client.close()


if __name__ == "__main__":
    main()
