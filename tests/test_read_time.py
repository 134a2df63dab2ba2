import pytest
from blog.utils.read_time import estimate_minutes

class TestReadTimeFloor:
    @pytest.mark.parametrize("markup", [None, "", "   ", "\n\t\n"])
    def test_blank_content_is_one_minute(self, markup):
        """空内容直接返回 1 分钟"""
        assert estimate_minutes(markup) == 1

    def test_short_english_text(self):
        """两个英文单词约 0.67 秒，向上取整为 1 分钟"""
        assert estimate_minutes("hello world") == 1

    def test_never_below_one(self):
        assert estimate_minutes("#") == 1
        assert estimate_minutes("12345 67890") == 1

class TestReadTimeCosts:
    def test_cjk_characters(self):
        """10500 个汉字 ≈ 1796 秒 ≈ 30 分钟"""
        assert estimate_minutes("字" * 10500) == 30

    def test_english_words(self):
        # 181 words * 0.333 s = 60.27 s -> 2 minutes
        assert estimate_minutes(" ".join(["word"] * 180)) == 1
        assert estimate_minutes(" ".join(["word"] * 181)) == 2

    def test_words_inside_code_are_not_counted_as_prose(self):
        prose_only = " ".join(["word"] * 170)
        inline = prose_only + " " + " ".join(["`code`"] * 50)
        assert estimate_minutes(inline) == 1

    def test_code_block_lines(self):
        """代码块每行 0.684 秒"""
        block = "```\n" + "\n".join(["x = 1"] * 100) + "\n```"
        # 102 lines * 0.684 s = 69.8 s -> 2 minutes
        assert estimate_minutes(block) == 2

    def test_images(self):
        images = "\n".join(["![cover](https://example.com/a.png)"] * 5)
        # 5 * 12 s = 60 s plus the alt words -> 2 minutes
        assert estimate_minutes(images) == 2
        assert estimate_minutes("![](a.png)") == 1

    def test_math_expressions(self):
        inline = " ".join(["$x$"] * 4)
        # 4 * 15 s + 4 words = 61.3 s
        assert estimate_minutes(inline) == 2
        block = "$$a+b$$\n" * 4
        assert estimate_minutes(block) == 2

    def test_table_rows(self):
        table = "\n".join(["| 1 | 2 |"] * 6)
        assert estimate_minutes(table) == 1
        table = "\n".join(["| 1 | 2 |"] * 7)
        assert estimate_minutes(table) == 2

    def test_list_items(self):
        items = "\n".join(["- 项"] * 20)
        # 20 * (3 + 0.171) s = 63.4 s
        assert estimate_minutes(items) == 2
        numbered = "\n".join([f"{i}. 项" for i in range(1, 19)])
        assert estimate_minutes(numbered) == 1

    def test_crlf_line_endings(self):
        table = "\r\n".join(["| 1 | 2 |"] * 7)
        assert estimate_minutes(table) == 2

    def test_deterministic(self):
        content = "# 标题\n\nSome *markdown* text with `code` and $x^2$.\n\n- one\n- two\n"
        assert estimate_minutes(content) == estimate_minutes(content)
