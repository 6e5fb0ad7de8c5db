"""Integration tests for task endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.infrastructure.persistence.models import TaskModel


@pytest.fixture
def owner(signup, client: AsyncClient):
    """Sign up a user with one list; gives ``(headers, list_id)``."""

    async def _owner(email: str = "owner@example.com"):
        _, access_token, _ = await signup(email)
        headers = {"x-access-token": access_token}
        res = await client.post("/lists", json={"title": "Work"}, headers=headers)
        return headers, res.json()["_id"]

    return _owner


@pytest.mark.asyncio
async def test_create_and_get_tasks(client: AsyncClient, owner):
    headers, list_id = await owner()

    res = await client.post(f"/lists/{list_id}/tasks", json={"title": "Write report"}, headers=headers)

    assert res.status_code == 200
    task = res.json()
    assert task["title"] == "Write report"
    assert task["_listId"] == list_id
    assert task["completed"] is False

    res = await client.get(f"/lists/{list_id}/tasks", headers=headers)
    assert res.json() == [task]

    res = await client.get(f"/lists/{list_id}/tasks/{task['_id']}", headers=headers)
    assert res.json() == task


@pytest.mark.asyncio
async def test_create_task_in_foreign_list(client: AsyncClient, db_session: AsyncSession, owner, signup):
    _, alice_list = await owner("alice@example.com")
    _, bob_token, _ = await signup("bob@example.com")

    res = await client.post(
        f"/lists/{alice_list}/tasks",
        json={"title": "Sneaky"},
        headers={"x-access-token": bob_token},
    )

    assert res.status_code == 404
    assert res.json() == {"error": "List not found"}
    count = (await db_session.execute(select(func.count(TaskModel.id)))).scalar_one()
    assert count == 0


@pytest.mark.asyncio
async def test_get_tasks_of_foreign_list(client: AsyncClient, owner, signup):
    alice_headers, alice_list = await owner("alice@example.com")
    await client.post(f"/lists/{alice_list}/tasks", json={"title": "Private"}, headers=alice_headers)
    _, bob_token, _ = await signup("bob@example.com")

    res = await client.get(f"/lists/{alice_list}/tasks", headers={"x-access-token": bob_token})

    assert res.status_code == 404


@pytest.mark.asyncio
async def test_update_task(client: AsyncClient, db_session: AsyncSession, owner):
    headers, list_id = await owner()
    task = (await client.post(f"/lists/{list_id}/tasks", json={"title": "Draft"}, headers=headers)).json()

    res = await client.patch(
        f"/lists/{list_id}/tasks/{task['_id']}",
        json={"completed": True, "title": "Final", "_listId": "elsewhere"},
        headers=headers,
    )

    assert res.status_code == 200
    assert res.json() == {"message": "Updated successfully."}

    stored = await db_session.get(TaskModel, task["_id"])
    assert stored.completed is True
    assert stored.title == "Final"
    assert stored.list_id == list_id


@pytest.mark.asyncio
async def test_task_must_belong_to_list(client: AsyncClient, owner):
    headers, list_id = await owner()
    other_list = (await client.post("/lists", json={"title": "Home"}, headers=headers)).json()["_id"]
    task = (await client.post(f"/lists/{list_id}/tasks", json={"title": "Draft"}, headers=headers)).json()

    res = await client.get(f"/lists/{other_list}/tasks/{task['_id']}", headers=headers)

    assert res.status_code == 404
    assert res.json() == {"error": "Task not found"}


@pytest.mark.asyncio
async def test_delete_task(client: AsyncClient, db_session: AsyncSession, owner):
    headers, list_id = await owner()
    task = (await client.post(f"/lists/{list_id}/tasks", json={"title": "Temp"}, headers=headers)).json()

    res = await client.delete(f"/lists/{list_id}/tasks/{task['_id']}", headers=headers)

    assert res.status_code == 200
    assert res.json() == task
    assert await db_session.get(TaskModel, task["_id"]) is None


@pytest.mark.asyncio
async def test_delete_missing_task(client: AsyncClient, owner):
    headers, list_id = await owner()

    res = await client.delete(f"/lists/{list_id}/tasks/does-not-exist", headers=headers)

    assert res.status_code == 404
