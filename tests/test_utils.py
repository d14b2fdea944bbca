"""Tests for chunklex utility modules."""

import logging


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        from chunklex.utils import get_logger

        assert get_logger("mymodule").name == "chunklex.mymodule"

    def test_keeps_package_names(self) -> None:
        from chunklex.utils import get_logger

        assert get_logger("chunklex").name == "chunklex"
        assert get_logger("chunklex.lexer.core").name == "chunklex.lexer.core"

    def test_returns_stdlib_logger(self) -> None:
        from chunklex.utils import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)

    def test_debug_summary_logged(self, caplog) -> None:
        from chunklex import Tokenizer

        t = Tokenizer()
        t.add_rule(r"^[a-z]+$", "word")
        with caplog.at_level(logging.DEBUG, logger="chunklex"):
            t.tokens("abc")

        assert "Tokenized 3 chars in 1 chunks" in caplog.text
