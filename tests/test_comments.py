"""
Tests for commenting, reporting, restoring and moderation.
"""

from conftest import login, make_post


def add_comment(client, post_id, text="Nice post"):
    response = client.post(f"/comments/{post_id}", json={"text": text})
    assert response.status_code == 200
    return response.json()["insertedId"]


class TestAddComment:

    def test_comment_is_linked_from_post(self, client, db, author):
        post_id = make_post(db, author)
        login(client, author)
        comment_id = add_comment(client, post_id)
        post = db["posts"].find_one({"_id": post_id})
        assert [str(c) for c in post["comments"]] == [comment_id]
        comment = db["comments"].find_one()
        assert comment["email"] == author
        assert comment["postId"] == post_id

    def test_comment_requires_session(self, client, db, author):
        post_id = make_post(db, author)
        response = client.post(f"/comments/{post_id}", json={"text": "hi"})
        assert response.status_code == 401

    def test_post_comments_join_author(self, client, db, author):
        post_id = make_post(db, author)
        login(client, author)
        add_comment(client, post_id, "first")
        comments = client.get(f"/comments/{post_id}").json()
        assert [c["text"] for c in comments] == ["first"]
        assert comments[0]["author"]["email"] == author

    def test_comment_count_in_feed(self, client, db, author):
        post_id = make_post(db, author)
        login(client, author)
        add_comment(client, post_id)
        add_comment(client, post_id)
        post = client.get(f"/post/{post_id}").json()[0]
        assert post["commentCount"] == 2

    def test_comments_for_unknown_post_is_empty(self, client):
        assert client.get("/comments/65a000000000000000000000").json() == []


class TestReportRestore:

    def test_report_hides_and_restore_shows(self, client, db, author):
        post_id = make_post(db, author)
        login(client, author)
        keep_id = add_comment(client, post_id, "keep")
        bad_id = add_comment(client, post_id, "bad")

        response = client.post(f"/report/{bad_id}", json={"feedback": "spam"})
        assert response.status_code == 200
        post = db["posts"].find_one({"_id": post_id})
        assert [str(c) for c in post["comments"]] == [keep_id]
        assert [c["text"] for c in client.get(f"/comments/{post_id}").json()] == ["keep"]
        stored = db["comments"].find_one({"text": "bad"})
        assert stored["reported"] is True
        assert stored["feedback"] == "spam"

        assert client.get(f"/comments-restore/{bad_id}").status_code == 200
        post = db["posts"].find_one({"_id": post_id})
        assert sorted(str(c) for c in post["comments"]) == sorted([keep_id, bad_id])
        assert {c["text"] for c in client.get(f"/comments/{post_id}").json()} == {"keep", "bad"}
        stored = db["comments"].find_one({"text": "bad"})
        assert "reported" not in stored and "feedback" not in stored

    def test_report_requires_session(self, client, db, author):
        post_id = make_post(db, author)
        login(client, author)
        comment_id = add_comment(client, post_id)
        client.get("/logout")
        client.cookies.clear()
        assert client.post(f"/report/{comment_id}", json={"feedback": "x"}).status_code == 401

    def test_restoring_unreported_comment_does_not_duplicate(self, client, db, author):
        post_id = make_post(db, author)
        login(client, author)
        add_comment(client, post_id)
        comment_id = add_comment(client, post_id)
        client.get(f"/comments-restore/{comment_id}")
        post = db["posts"].find_one({"_id": post_id})
        assert len(post["comments"]) == 2

    def test_general_listing_skips_reported(self, client, db, author):
        post_id = make_post(db, author)
        login(client, author)
        add_comment(client, post_id, "fine")
        bad_id = add_comment(client, post_id, "bad")
        client.post(f"/report/{bad_id}", json={"feedback": "rude"})
        comments = client.get("/comments", params={"page": 0, "size": 10}).json()
        assert [c["text"] for c in comments] == ["fine"]


class TestModeration:

    def test_reported_queue_is_admin_only(self, client, author):
        login(client, author)
        assert client.get("/reported-comments", params={"page": 0, "size": 10}).status_code == 401

    def test_reported_queue_lists_reported(self, client, db, author, admin):
        post_id = make_post(db, author)
        login(client, author)
        ids = [add_comment(client, post_id, f"c{i}") for i in range(3)]
        for comment_id in ids:
            client.post(f"/report/{comment_id}", json={"feedback": "spam"})
        login(client, admin)
        response = client.get("/reported-comments", params={"page": 0, "size": 2})
        assert response.status_code == 200
        assert len(response.json()) == 2
        assert all(c["reported"] for c in response.json())
        assert client.get("/reported-comments-count").json() == {"count": 3}

    def test_admin_deletes_comment(self, client, db, author, admin):
        post_id = make_post(db, author)
        login(client, author)
        comment_id = add_comment(client, post_id)
        login(client, admin)
        response = client.delete(f"/comments/{comment_id}")
        assert response.json()["deletedCount"] == 1
        assert db["comments"].count_documents({}) == 0
        assert db["posts"].find_one({"_id": post_id})["comments"] == []

    def test_delete_requires_admin(self, client, db, author):
        post_id = make_post(db, author)
        login(client, author)
        comment_id = add_comment(client, post_id)
        assert client.delete(f"/comments/{comment_id}").status_code == 401
