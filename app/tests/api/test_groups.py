import re

import pytest

from modules.og.domain import MembershipState

SCENARIO_MESSAGE = (
    "Hi [current-user:name], click here if you would to subscribe to this "
    "group called [node:title]"
)


def _links(html):
    return re.findall(r'<a href="([^"]*)"[^>]*>([^<]*)</a>', html)


@pytest.mark.integration
@pytest.mark.usefixtures("open_groups")
class TestGroupPage:
    def test_registered_user_sees_personalised_subscribe_link(
        self, login_as, formatter_store, group, bob
    ):
        formatter_store.update({"subscribe_message": SCENARIO_MESSAGE})

        response = login_as(bob).get(f"/node/{group.id}")

        assert response.status_code == 200
        assert _links(response.text) == [
            (
                f"/group/node/{group.id}/subscribe",
                "Hi bob, click here if you would to subscribe to this group "
                "called Hiking club",
            )
        ]
        assert 'class="group subscribe"' in response.text

    def test_owner_sees_manager_notice(self, login_as, group, alice):
        response = login_as(alice).get(f"/node/{group.id}")
        assert _links(response.text) == []
        assert (
            '<span title="You are the group manager" class="group manager">'
            "You are the group manager</span>"
        ) in response.text
        assert response.headers["X-Cache-Contexts"] == "og_membership_state user"

    def test_anonymous_link_goes_to_login(self, client, group):
        response = client.get(f"/node/{group.id}")
        assert _links(response.text) == [
            (f"/user/login?destination=%2Fnode%2F{group.id}", "Subscribe to group")
        ]
        assert response.headers["X-Cache-Contexts"] == "og_membership_state url"

    def test_member_sees_unsubscribe_link(self, login_as, memberships, group, bob):
        memberships.create_membership(group, bob, MembershipState.PENDING)
        response = login_as(bob).get(f"/node/{group.id}")
        assert _links(response.text) == [
            (f"/group/node/{group.id}/unsubscribe", "Unsubscribe from group")
        ]

    def test_blocked_member_sees_nothing(self, login_as, memberships, group, bob):
        memberships.create_membership(group, bob, MembershipState.BLOCKED)
        response = login_as(bob).get(f"/node/{group.id}")
        assert response.status_code == 200
        assert '<div class="field field--og-group"></div>' in response.text

    def test_title_is_escaped(self, client, storage, alice):
        group = storage.create_group("<script>x</script>", owner_id=alice.id)
        response = client.get(f"/node/{group.id}")
        assert "<script>" not in response.text
        assert "&lt;script&gt;x&lt;/script&gt;" in response.text

    def test_missing_group_is_404(self, client):
        response = client.get("/node/999")
        assert response.status_code == 404
        assert response.json() == {"detail": "node 999 not found"}


@pytest.mark.integration
class TestGroupPageDefaults:
    def test_default_access_shows_request_link(self, login_as, group, bob):
        response = login_as(bob).get(f"/node/{group.id}")
        assert _links(response.text) == [
            (f"/group/node/{group.id}/subscribe", "Request group membership")
        ]
        assert 'class="group subscribe request"' in response.text


@pytest.mark.integration
@pytest.mark.usefixtures("open_groups")
class TestSubscribe:
    def test_anonymous_is_sent_to_login(self, client, group):
        response = client.post(f"/group/node/{group.id}/subscribe")
        assert response.status_code == 303
        assert response.headers["location"] == (
            f"/user/login?destination=%2Fgroup%2Fnode%2F{group.id}%2Fsubscribe"
        )

    def test_subscribe_creates_active_membership(
        self, login_as, memberships, group, bob
    ):
        response = login_as(bob).post(f"/group/node/{group.id}/subscribe")
        assert response.status_code == 303
        assert response.headers["location"] == f"/node/{group.id}"
        assert memberships.is_member(group, bob)

    def test_subscribe_via_get(self, login_as, memberships, group, bob):
        response = login_as(bob).get(f"/group/node/{group.id}/subscribe")
        assert response.status_code == 303
        assert memberships.is_member(group, bob)

    def test_existing_member_is_redirected(self, login_as, memberships, group, bob):
        memberships.create_membership(group, bob, MembershipState.PENDING)
        response = login_as(bob).post(f"/group/node/{group.id}/subscribe")
        assert response.status_code == 303
        assert memberships.get_membership(group, bob).state == MembershipState.PENDING

    def test_blocked_member_is_forbidden(self, login_as, memberships, group, bob):
        memberships.create_membership(group, bob, MembershipState.BLOCKED)
        response = login_as(bob).post(f"/group/node/{group.id}/subscribe")
        assert response.status_code == 403
        assert response.json()["detail"] == "You are not allowed to join Hiking club."

    def test_missing_group_is_404(self, login_as, bob):
        response = login_as(bob).post("/group/node/42/subscribe")
        assert response.status_code == 404


@pytest.mark.integration
class TestSubscribeWithApproval:
    def test_request_creates_pending_membership(self, login_as, memberships, group, bob):
        response = login_as(bob).post(f"/group/node/{group.id}/subscribe")
        assert response.status_code == 303
        membership = memberships.get_membership(group, bob)
        assert membership.state == MembershipState.PENDING


@pytest.mark.integration
class TestUnsubscribe:
    def test_member_leaves_group(self, login_as, memberships, group, bob):
        memberships.create_membership(group, bob)
        response = login_as(bob).post(f"/group/node/{group.id}/unsubscribe")
        assert response.status_code == 303
        assert response.headers["location"] == f"/node/{group.id}"
        assert memberships.get_membership(group, bob) is None

    def test_pending_member_withdraws_request(self, login_as, memberships, group, bob):
        memberships.create_membership(group, bob, MembershipState.PENDING)
        login_as(bob).get(f"/group/node/{group.id}/unsubscribe")
        assert memberships.get_membership(group, bob) is None

    def test_owner_cannot_leave(self, login_as, group, alice):
        response = login_as(alice).post(f"/group/node/{group.id}/unsubscribe")
        assert response.status_code == 400
        assert "cannot leave" in response.json()["detail"]

    def test_blocked_member_is_forbidden(self, login_as, memberships, group, bob):
        memberships.create_membership(group, bob, MembershipState.BLOCKED)
        response = login_as(bob).post(f"/group/node/{group.id}/unsubscribe")
        assert response.status_code == 403
        assert memberships.is_member_blocked(group, bob)

    def test_non_member_is_redirected(self, login_as, group, bob):
        response = login_as(bob).post(f"/group/node/{group.id}/unsubscribe")
        assert response.status_code == 303
        assert response.headers["location"] == f"/node/{group.id}"

    def test_anonymous_is_sent_to_login(self, client, group):
        response = client.get(f"/group/node/{group.id}/unsubscribe")
        assert response.status_code == 303
        assert response.headers["location"].startswith("/user/login?destination=")


@pytest.mark.integration
@pytest.mark.usefixtures("closed_groups")
class TestClosedGroup:
    @pytest.fixture
    def private_group(self, storage, alice):
        return storage.create_group("Secret society", owner_id=alice.id, bundle="private")

    def test_page_shows_closed_notice(self, login_as, private_group, bob):
        response = login_as(bob).get(f"/node/{private_group.id}")
        assert _links(response.text) == []
        assert 'class="group closed"' in response.text
        assert "Only a group administrator can add you." in response.text

    def test_subscribe_is_forbidden(self, login_as, memberships, private_group, bob):
        response = login_as(bob).post(f"/group/node/{private_group.id}/subscribe")
        assert response.status_code == 403
        assert memberships.get_membership(private_group, bob) is None

    def test_group_administrator_may_join(self, login_as, storage, private_group):
        admin = storage.create_account(
            "admin", permissions=["administer organic groups"]
        )
        response = login_as(admin).post(f"/group/node/{private_group.id}/subscribe")
        assert response.status_code == 303
