"""User management controller of the Admin module."""

from __future__ import annotations

from typing import Any

from .base import AbstractAdminController


class UsersController(AbstractAdminController):
    namespace = "AdminModule"

    def run(self, request: Any) -> Any:
        if not self.authorize(request):
            return {"error": "forbidden"}
        return {"users": ["alice", "bob"]}
