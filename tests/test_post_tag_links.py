import pytest
from blog.models.post import Post
from blog.models.post_tag import PostTag
from blog.models.tag import Tag
from blog.repositories.post_tag import PostTagRepository, TagLink

def linked_tag_ids(links, post_id):
    return [link.tag_id for link in links.links_for_posts([post_id])]

@pytest.fixture
def links(session):
    return PostTagRepository(session)

@pytest.fixture
def tags(session):
    """创建三个标签 a, b, c"""
    created = [Tag(name=name) for name in ("a", "b", "c")]
    session.add_all(created)
    session.commit()
    return created

@pytest.fixture
def posts(session):
    created = [Post(title=f"Post {i}", slug=f"post-{i}", content="content") for i in range(2)]
    session.add_all(created)
    session.commit()
    return created

class TestReplaceLinks:
    def test_replace_is_idempotent(self, session, links, tags, posts):
        """同一标签集合替换两次，只保留一份关联"""
        post = posts[0]
        tag_ids = [tags[1].id, tags[2].id]

        links.replace_links(post.id, tag_ids)
        links.replace_links(post.id, tag_ids)
        session.commit()

        assert linked_tag_ids(links, post.id) == sorted(tag_ids)
        assert session.query(PostTag).filter(PostTag.post_id == post.id).count() == 2

    def test_duplicate_ids_collapse(self, session, links, tags, posts):
        post = posts[0]
        links.replace_links(post.id, [tags[0].id, tags[0].id, tags[1].id])
        session.commit()

        assert linked_tag_ids(links, post.id) == [tags[0].id, tags[1].id]

    def test_replace_drops_previous_links(self, session, links, tags, posts):
        post = posts[0]
        links.replace_links(post.id, [tags[0].id, tags[1].id])
        links.replace_links(post.id, [tags[2].id])
        session.commit()

        assert linked_tag_ids(links, post.id) == [tags[2].id]

    @pytest.mark.parametrize("empty", [[], None])
    def test_empty_set_clears(self, session, links, tags, posts, empty):
        post = posts[0]
        links.replace_links(post.id, [tags[0].id])
        links.replace_links(post.id, empty)
        session.commit()

        assert linked_tag_ids(links, post.id) == []

    def test_other_posts_untouched(self, session, links, tags, posts):
        first, second = posts
        links.replace_links(first.id, [tags[0].id])
        links.replace_links(second.id, [tags[0].id, tags[1].id])
        links.replace_links(first.id, [])
        session.commit()

        assert linked_tag_ids(links, second.id) == [tags[0].id, tags[1].id]

class TestLinkQueries:
    def test_delete_by_post_returns_rowcount(self, session, links, tags, posts):
        post = posts[0]
        links.replace_links(post.id, [tag.id for tag in tags])

        assert links.delete_by_post(post.id) == 3
        assert links.delete_by_post(post.id) == 0

    def test_count_by_tag(self, session, links, tags, posts):
        first, second = posts
        links.replace_links(first.id, [tags[0].id, tags[1].id])
        links.replace_links(second.id, [tags[0].id])
        session.commit()

        assert links.count_by_tag(tags[0].id) == 2
        assert links.count_by_tag(tags[1].id) == 1
        assert links.count_by_tag(tags[2].id) == 0

    def test_links_for_posts_in_one_batch(self, session, links, tags, posts):
        """批量查询多篇文章的标签，按文章ID、标签ID排序"""
        first, second = posts
        links.replace_links(first.id, [tags[1].id, tags[0].id])
        links.replace_links(second.id, [tags[2].id])
        session.commit()

        result = links.links_for_posts([second.id, first.id])

        assert result == [
            TagLink(first.id, tags[0].id, "a"),
            TagLink(first.id, tags[1].id, "b"),
            TagLink(second.id, tags[2].id, "c"),
        ]

    def test_links_for_no_posts(self, links):
        assert links.links_for_posts([]) == []
