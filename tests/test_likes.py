"""Tests for like toggling on questions and answers."""

import pytest
from bson import ObjectId

from forum.discussions.repositories.core.repository_factory import RepositoryFactory
from forum.discussions.services.answer.answer_service import AnswerService
from forum.discussions.services.like.like_service import LikeService
from forum.discussions.services.question.question_service import QuestionService


def create_question(user: dict) -> dict:
    return QuestionService().create_question(str(user["_id"]), {"title": "Q", "body": "B"})


def test_like_then_unlike_question_scenario(client, auth_headers, user, db):
    question = create_question(user)
    assert question["computed"] == {"answers": 0, "likes": 0}
    path = f"/api/v1/questions/{question['_id']}/like"

    first = client.post(path, headers=auth_headers(user))

    assert first.status_code == 200
    liked = first.get_json()["data"]
    assert liked["_id"] == str(question["_id"])
    assert liked["computed"]["likes"] == 1
    assert liked["liked"]["likedBy"] == str(user["_id"])
    assert liked["liked"]["question"] == str(question["_id"])
    assert liked["liked"]["answer"] is None
    assert db["likes"].count_documents({"question": question["_id"], "likedBy": user["_id"]}) == 1

    second = client.post(path, headers=auth_headers(user))

    unliked = second.get_json()["data"]
    assert unliked["computed"]["likes"] == 0
    assert "liked" not in unliked
    assert db["likes"].count_documents({"question": question["_id"], "likedBy": user["_id"]}) == 0


@pytest.mark.parametrize("toggles", [1, 2, 3, 4, 5])
def test_toggle_parity_decides_like_row(user, db, toggles):
    question = create_question(user)
    service = LikeService()

    for _ in range(toggles):
        result = service.like_question(str(user["_id"]), str(question["_id"]))

    expected = toggles % 2
    assert db["likes"].count_documents({"question": question["_id"]}) == expected
    assert result["computed"]["likes"] == expected
    assert ("liked" in result) is bool(expected)


def test_like_answer_toggles(client, auth_headers, user, other_user, db):
    question = create_question(user)
    answer = AnswerService().create_answer(str(user["_id"]), str(question["_id"]), {"body": "A"})
    path = f"/api/v1/answers/{answer['_id']}/like"

    client.post(path, headers=auth_headers(user))
    response = client.post(path, headers=auth_headers(other_user))

    data = response.get_json()["data"]
    assert data["computed"]["likes"] == 2
    assert data["liked"]["likedBy"] == str(other_user["_id"])
    assert data["liked"]["answer"] == str(answer["_id"])
    assert db["likes"].count_documents({"answer": answer["_id"]}) == 2

    response = client.post(path, headers=auth_headers(user))

    data = response.get_json()["data"]
    assert data["computed"]["likes"] == 1
    assert "liked" not in data


def test_question_and_answer_likes_are_independent(user, db):
    question = create_question(user)
    answer = AnswerService().create_answer(str(user["_id"]), str(question["_id"]), {"body": "A"})
    service = LikeService()

    service.like_question(str(user["_id"]), str(question["_id"]))
    service.like_answer(str(user["_id"]), str(answer["_id"]))

    assert db["likes"].count_documents({"likedBy": user["_id"]}) == 2
    assert db["questions"].find_one({"_id": question["_id"]})["computed"]["likes"] == 1
    assert db["answers"].find_one({"_id": answer["_id"]})["computed"]["likes"] == 1


def test_duplicate_insert_from_racing_toggle_is_not_double_counted(user, db, monkeypatch):
    question = create_question(user)
    service = LikeService()
    service.like_question(str(user["_id"]), str(question["_id"]))

    like_repo = RepositoryFactory.get_like_repo()
    original_find = like_repo.find_like
    calls = []

    def stale_find(*args, **kwargs):
        # first read misses the row another request already wrote
        calls.append(args)
        if len(calls) == 1:
            return None
        return original_find(*args, **kwargs)

    monkeypatch.setattr(like_repo, "find_like", stale_find)

    result = service.like_question(str(user["_id"]), str(question["_id"]))

    assert result["liked"]["likedBy"] == user["_id"]
    assert result["computed"]["likes"] == 1
    assert db["likes"].count_documents({"question": question["_id"]}) == 1


def test_lost_delete_race_does_not_decrement(user, db, monkeypatch):
    question = create_question(user)
    service = LikeService()
    service.like_question(str(user["_id"]), str(question["_id"]))

    like_repo = RepositoryFactory.get_like_repo()
    monkeypatch.setattr(like_repo, "delete_like", lambda like_id: 0)

    result = service.like_question(str(user["_id"]), str(question["_id"]))

    assert "liked" not in result
    assert result["computed"]["likes"] == 1


def test_like_unknown_question_returns_only_like_state(user, db):
    missing_id = ObjectId()

    result = LikeService().like_question(str(user["_id"]), str(missing_id))

    assert set(result) == {"liked"}
    assert result["liked"]["question"] == missing_id


def test_like_requires_token(client, user):
    question = create_question(user)

    response = client.post(f"/api/v1/questions/{question['_id']}/like")

    assert response.status_code == 401


def test_like_with_malformed_id_is_server_error(client, auth_headers, user, db):
    response = client.post("/api/v1/answers/12345/like", headers=auth_headers(user))

    assert response.status_code == 500
    assert response.get_json()["success"] is False
    assert db["likes"].count_documents({}) == 0
