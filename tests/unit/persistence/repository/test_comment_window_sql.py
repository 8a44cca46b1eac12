"""Unit tests for the keyset window SQL, compiled for PostgreSQL without a database."""

from sqlalchemy.dialects import postgresql

from blog.domain.value import CommentId, CommentScope, CommentSort, PostId
from blog.persistence.repository.comment import window_statement


def compile_sql(stmt) -> str:
    return str(
        stmt.compile(
            dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}
        )
    )


class TestWindowStatement:
    """Shape of the statement behind find_window."""

    def test_first_top_level_window(self):
        """No cursor: scope filter, newest first, limit applied."""
        sql = compile_sql(
            window_statement(
                CommentScope.top_level(PostId(1)), CommentSort(), None, 11
            )
        )

        assert "comments.post_id = 1" in sql
        assert "comments.parent_comment_id IS NULL" in sql
        assert "ORDER BY comments.id DESC" in sql
        assert "LIMIT 11" in sql
        assert "comments.id <" not in sql

    def test_created_cursor_is_strict(self):
        """Descending created order continues strictly below the cursor id."""
        sql = compile_sql(
            window_statement(
                CommentScope.top_level(PostId(1)), CommentSort(), (42,), 11
            )
        )

        assert "comments.id < 42" in sql

    def test_ascending_cursor(self):
        sql = compile_sql(
            window_statement(
                CommentScope.replies(CommentId(5)),
                CommentSort.parse("+created"),
                (42,),
                3,
            )
        )

        assert "comments.parent_comment_id = 5" in sql
        assert "comments.id > 42" in sql
        assert "ORDER BY comments.id ASC" in sql

    def test_likes_cursor_uses_row_comparison(self):
        """Likes order pages on the (likes, id) pair so ties are stable."""
        sql = compile_sql(
            window_statement(
                CommentScope.top_level(PostId(1)),
                CommentSort.parse("-likes"),
                (3, 42),
                11,
            )
        )

        assert "(comments.likes, comments.id) < (3, 42)" in sql
        assert "ORDER BY comments.likes DESC, comments.id DESC" in sql
