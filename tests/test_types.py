from gist_client import Comment, Gist, GistFile, User


def test_gist_from_json_reads_owner_and_files():
    gist = Gist.from_json(
        {
            "id": "aa5a315d61ae9438b18d",
            "description": "Hello",
            "public": True,
            "comments": 3,
            "owner": {"login": "octocat", "id": 1},
            "files": {"hello.rb": {"filename": "hello.rb", "language": "Ruby", "raw_url": "https://x"}},
            "unknown_field": "ignored",
        }
    )

    assert gist.repo == "aa5a315d61ae9438b18d"
    assert gist.user == User(login="octocat", id=1)
    assert gist.files["hello.rb"].language == "Ruby"
    assert gist.comments == 3


def test_gist_numeric_id_is_a_string():
    gist = Gist.from_json({"id": 12345, "repo": 12345})

    assert gist.id == "12345"
    assert gist.repo == "12345"


def test_gist_to_json_omits_unset_and_server_fields():
    gist = Gist(
        description="d",
        public=False,
        files={"a.txt": GistFile(filename="a.txt", content="x", size=1, raw_url="https://x")},
    )

    assert gist.to_json() == {
        "description": "d",
        "public": False,
        "files": {"a.txt": {"filename": "a.txt", "content": "x"}},
    }


def test_comment_from_json():
    comment = Comment.from_json({"id": 1, "body": "hi", "user": {"login": "alice"}, "created_at": "2011-04-18T23:23:56Z"})

    assert comment.body == "hi"
    assert comment.user.login == "alice"
    assert comment.created_at == "2011-04-18T23:23:56Z"


def test_comment_without_author():
    assert Comment.from_json({"id": 1}).user is None
