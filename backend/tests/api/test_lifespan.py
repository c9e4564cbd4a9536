"""App lifespan — services are built at startup from settings and released at shutdown."""

from todo_api.main_identity import app as identity_app
from todo_api.main_todo import app as todo_app
from todo_api.services.identity_service import IdentityService
from todo_api.services.todo_service import TodoService


async def test_identity_lifespan_builds_service():
    async with identity_app.router.lifespan_context(identity_app):
        service = identity_app.state.identity_service
        assert isinstance(service, IdentityService)
        report = await service.health_check()
        assert report.ok


async def test_todo_lifespan_builds_service():
    async with todo_app.router.lifespan_context(todo_app):
        service = todo_app.state.todo_service
        assert isinstance(service, TodoService)
        assert await service.list_todos() == []
