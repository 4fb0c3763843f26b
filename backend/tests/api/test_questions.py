"""Questions routes — end-to-end CRUD through HTTP against both Store backends.

Invariants:
    - POST then GET returns the posted question
    - Pagination errors answer 416 with the taxonomy message
    - Updating/deleting an absent id answers 416 QUESTION_NOT_FOUND, never 5xx
    - Body decode failures answer 422; wrong-typed or oversized path ids answer 404
"""

import pytest

QUESTION = {"id": "1", "title": "t", "content": "c", "tags": None}


async def _post(client, title: str, tags=None):
    res = await client.post(
        "/questions", json={"title": title, "content": f"{title} body", "tags": tags},
    )
    assert res.status_code == 200
    return res


async def test_post_then_get_returns_question(client):
    res = await client.post("/questions", json=QUESTION)
    assert res.status_code == 200
    assert res.text == "question added"

    res = await client.get("/questions", params={"limit": 10, "offset": 0})
    assert res.status_code == 200
    [question] = res.json()
    assert question["title"] == "t"
    assert question["content"] == "c"
    assert question["tags"] is None
    assert isinstance(question["id"], int)


async def test_get_without_params_returns_everything(client):
    for title in ("a", "b", "c"):
        await _post(client, title, tags=[title])
    res = await client.get("/questions")
    assert [q["title"] for q in res.json()] == ["a", "b", "c"]
    assert res.json()[0]["tags"] == ["a"]


async def test_get_with_limit_and_offset(client):
    for title in ("a", "b", "c", "d"):
        await _post(client, title)
    res = await client.get("/questions?limit=2&offset=1")
    assert [q["title"] for q in res.json()] == ["b", "c"]


async def test_offset_past_end_is_empty_page(client):
    await _post(client, "a")
    res = await client.get("/questions?limit=5&offset=10")
    assert res.status_code == 200
    assert res.json() == []


async def test_lone_limit_is_missing_parameters(client):
    res = await client.get("/questions?limit=1")
    assert res.status_code == 416
    assert res.json()["error"]["code"] == "MISSING_PARAMETERS"
    assert res.json()["error"]["message"] == "Missing parameter."


async def test_unparsable_limit_is_parse_error(client):
    res = await client.get("/questions?limit=x&offset=0")
    assert res.status_code == 416
    body = res.json()["error"]
    assert body["code"] == "PARSE_ERROR"
    assert body["message"].startswith("cannot parse parameter: ")


@pytest.mark.parametrize("limit", ["99999999999999999999", "2147483648", "+3", "1_0"])
async def test_out_of_range_or_non_digit_limit_is_parse_error(client, limit):
    res = await client.get(f"/questions?limit={limit}&offset=0")
    assert res.status_code == 416
    assert res.json()["error"]["code"] == "PARSE_ERROR"


async def test_update_question(client):
    await _post(client, "old")
    [stored] = (await client.get("/questions")).json()

    res = await client.put(
        f"/questions/{stored['id']}",
        json={"id": stored["id"], "title": "new", "content": "x", "tags": ["q"]},
    )

    assert res.status_code == 200
    assert res.json() == {
        "id": stored["id"], "title": "new", "content": "x", "tags": ["q"],
    }
    assert (await client.get("/questions")).json() == [res.json()]


async def test_update_absent_question_is_mapped_not_found(client):
    res = await client.put(
        "/questions/99", json={"id": 99, "title": "t", "content": "c", "tags": None},
    )
    assert res.status_code == 416
    assert res.json()["error"]["code"] == "QUESTION_NOT_FOUND"
    assert res.json()["error"]["message"] == "Question not found"


async def test_delete_question(client):
    await _post(client, "doomed")
    [stored] = (await client.get("/questions")).json()

    res = await client.delete(f"/questions/{stored['id']}")
    assert res.status_code == 200
    assert res.text == f"Question {stored['id']} deleted"
    assert (await client.get("/questions")).json() == []

    res = await client.delete(f"/questions/{stored['id']}")
    assert res.status_code == 416
    assert res.json()["error"]["code"] == "QUESTION_NOT_FOUND"


async def test_post_missing_field_is_unprocessable(client):
    res = await client.post("/questions", json={"content": "no title"})
    assert res.status_code == 422
    message = res.json()["error"]["message"]
    assert "title" in message
    assert message.endswith(", Please try again later!")


async def test_post_malformed_json_is_unprocessable(client):
    res = await client.post(
        "/questions", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 422
    assert res.json()["error"]["code"] == "BODY_DESERIALIZE_ERROR"


async def test_non_integer_path_id_is_route_not_found(client):
    res = await client.delete("/questions/abc")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Route not found"


async def test_oversized_path_id_is_route_not_found(client):
    huge = "99999999999999999999"
    res = await client.put(
        f"/questions/{huge}",
        json={"id": 1, "title": "t", "content": "c", "tags": None},
    )
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Route not found"

    res = await client.delete(f"/questions/{huge}")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Route not found"


async def test_database_failure_is_unprocessable(failing_client):
    res = await failing_client.get("/questions")
    assert res.status_code == 422
    assert res.json()["error"]["code"] == "DATABASE_QUERY_ERROR"
    assert res.json()["error"]["message"] == "Cannot update, invalid data."


async def test_database_failure_on_update_is_unprocessable(failing_client):
    res = await failing_client.put(
        "/questions/1", json={"id": 1, "title": "t", "content": "c"},
    )
    assert res.status_code == 422
