"""Request schemas on their own: messages, defaults and identifier formats."""

import uuid

import pytest
from pydantic import ValidationError

from community_os.presentation.schemas.posts import CreateCommentSchema
from community_os.presentation.schemas.search import SearchQuerySchema


def field_errors(exc_info, field):
    return [e["msg"] for e in exc_info.value.errors() if e["loc"][-1] == field]


class TestCreateCommentSchema:
    def test_canonical_post_id(self):
        post_id = str(uuid.uuid4())
        schema = CreateCommentSchema.model_validate({"postId": post_id, "content": "Agreed"})
        assert schema.post_id == post_id
        assert schema.parent_id is None

    @pytest.mark.parametrize(
        "post_id",
        [
            "not-a-uuid",
            "",
            uuid.uuid4().hex,
            "{" + str(uuid.uuid4()) + "}",
            "urn:uuid:" + str(uuid.uuid4()),
            str(uuid.uuid4()) + "\n",
        ],
    )
    def test_post_id_message(self, post_id):
        with pytest.raises(ValidationError) as exc_info:
            CreateCommentSchema.model_validate({"postId": post_id, "content": "Agreed"})
        messages = field_errors(exc_info, "postId")
        assert len(messages) == 1
        assert "Post ID must be a valid UUID" in messages[0]

    def test_parent_id_uses_same_format(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateCommentSchema.model_validate(
                {"postId": str(uuid.uuid4()), "parentId": uuid.uuid4().hex, "content": "Agreed"}
            )
        assert field_errors(exc_info, "parentId")


class TestSearchQuerySchema:
    def test_pagination_defaults(self):
        schema = SearchQuerySchema.model_validate({"q": "python"})
        assert schema.limit == 20
        assert schema.offset == 0
        assert schema.type == "all"
        assert schema.community_id is None

    @pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"offset": -1}])
    def test_pagination_bounds(self, params):
        with pytest.raises(ValidationError):
            SearchQuerySchema.model_validate({"q": "python", **params})
