from loguru import logger

from iodocs_generator.generator.document import synthesize
from iodocs_generator.logging import configure_logging, get_logger
from iodocs_generator.model import ApiMeta
from iodocs_generator.tags import GET, name


class TestGetLogger:
    def test_get_logger_caches_results(self):
        assert get_logger("iodocs_generator.test") is get_logger("iodocs_generator.test")


class TestDuplicateNameWarning:
    def test_warning_is_logged(self):
        class First:
            @GET
            @name("shared")
            def a(self):
                pass

        class Second:
            @GET
            @name("shared")
            def b(self):
                pass

        configure_logging(level="WARNING", force_reconfigure=True)
        messages = []
        handler_id = logger.add(messages.append, level="WARNING", format="{message}")
        try:
            synthesize(ApiMeta(name="n", title="t", version="1", base_path="/"), [First, Second])
        finally:
            logger.remove(handler_id)

        assert any("'shared' is used more than once" in m for m in messages)
