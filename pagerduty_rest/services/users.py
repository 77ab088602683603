"""Users and contact methods."""

from __future__ import annotations

import httpx

from pagerduty_rest.hooks import invoke_with_hooks
from pagerduty_rest.instrumentation import call_context
from pagerduty_rest.models.users import (
    ContactMethod,
    ContactMethodPayload,
    GetUserOptions,
    ListContactMethodsResponse,
    ListUsersOptions,
    ListUsersResponse,
    User,
    UserPayload,
)
from pagerduty_rest.services.base import ResourceService, list_all


class UserService(ResourceService):
    """Manage users and their contact methods.

    Example:
        >>> users = client.users.list_all(ListUsersOptions(query="jsmith"))
        >>> print([u.email for u in users])
        ['jsmith@example.com']
    """

    @invoke_with_hooks(call_context("users.list", "GET"))
    def list(self, options: ListUsersOptions | None = None) -> ListUsersResponse:
        """List one page of users.

        Args:
            options: Filters (query, team_ids), includes and pagination

        Returns:
            Page of users with pagination metadata
        """
        return self._call("GET", "/users", ListUsersResponse, options=options)

    def list_all(self, options: ListUsersOptions | None = None) -> list[User]:
        """List users across all pages."""
        return list_all(self.list, options or ListUsersOptions(), lambda p: p.users)

    @invoke_with_hooks(call_context("users.create", "POST"))
    def create(self, user: User) -> User:
        """Create a user.

        Args:
            user: User to create; name and email are required by the API

        Returns:
            Created user with id set by the API
        """
        return self._call(
            "POST", "/users", UserPayload, body=UserPayload(user=user)
        ).user

    @invoke_with_hooks(call_context("users.get", "GET"))
    def get(self, user_id: str, options: GetUserOptions | None = None) -> User:
        return self._call(
            "GET", f"/users/{user_id}", UserPayload, options=options
        ).user

    @invoke_with_hooks(call_context("users.update", "PUT"))
    def update(self, user_id: str, user: User) -> User:
        return self._call(
            "PUT", f"/users/{user_id}", UserPayload, body=UserPayload(user=user)
        ).user

    @invoke_with_hooks(call_context("users.delete", "DELETE"))
    def delete(self, user_id: str) -> httpx.Response:
        return self._send("DELETE", f"/users/{user_id}")

    @invoke_with_hooks(call_context("users.list_contact_methods", "GET"))
    def list_contact_methods(self, user_id: str) -> ListContactMethodsResponse:
        return self._call(
            "GET", f"/users/{user_id}/contact_methods", ListContactMethodsResponse
        )

    @invoke_with_hooks(call_context("users.create_contact_method", "POST"))
    def create_contact_method(
        self, user_id: str, contact_method: ContactMethod
    ) -> ContactMethod:
        return self._call(
            "POST",
            f"/users/{user_id}/contact_methods",
            ContactMethodPayload,
            body=ContactMethodPayload(contact_method=contact_method),
        ).contact_method

    @invoke_with_hooks(call_context("users.get_contact_method", "GET"))
    def get_contact_method(self, user_id: str, contact_method_id: str) -> ContactMethod:
        return self._call(
            "GET",
            f"/users/{user_id}/contact_methods/{contact_method_id}",
            ContactMethodPayload,
        ).contact_method

    @invoke_with_hooks(call_context("users.update_contact_method", "PUT"))
    def update_contact_method(
        self, user_id: str, contact_method_id: str, contact_method: ContactMethod
    ) -> ContactMethod:
        return self._call(
            "PUT",
            f"/users/{user_id}/contact_methods/{contact_method_id}",
            ContactMethodPayload,
            body=ContactMethodPayload(contact_method=contact_method),
        ).contact_method

    @invoke_with_hooks(call_context("users.delete_contact_method", "DELETE"))
    def delete_contact_method(
        self, user_id: str, contact_method_id: str
    ) -> httpx.Response:
        return self._send(
            "DELETE", f"/users/{user_id}/contact_methods/{contact_method_id}"
        )
