"""Tests for diagram diffs and logging setup."""

import logging

from untangly import setup_logging
from untangly.grid_components import DiagramModel, diff


def grown(*steps):
    model = DiagramModel()
    model.start()
    for action, x, y, *rest in steps:
        if action == "engage":
            model.engage(x, y, rest[0])
        else:
            model.remove(x, y)
    return model


class TestDiff:
    def test_identical_models(self):
        a = grown(("engage", 0, 0, "p"))
        b = grown(("engage", 0, 0, "p"))

        assert not diff(a, b).has_changes()

    def test_engage_shows_added_and_engaged(self):
        result = diff(grown(), grown(("engage", 0, 0, "p")))

        assert result.added == [(-1, 0), (0, -1), (0, 1), (1, 0)]
        assert result.engaged == [(0, 0)]
        assert result.removed == []

    def test_remove_shows_removed_and_released(self):
        before = grown(("engage", 0, 0, "p"), ("engage", 1, 0, "q"))
        after = grown(("engage", 0, 0, "p"), ("engage", 1, 0, "q"), ("remove", 1, 0))

        result = diff(before, after)

        assert result.removed == [(1, -1), (1, 1), (2, 0)]
        assert result.released == [(1, 0)]
        assert result.added == []

    def test_changed_descriptor(self):
        result = diff(grown(("engage", 0, 0, "p")), grown(("engage", 0, 0, "q")))

        assert result.changed == [((0, 0), "p", "q")]


class TestSetupLogging:
    def test_handlers_are_replaced_not_stacked(self, tmp_path):
        log_file = tmp_path / "untangly.log"

        setup_logging(logging.DEBUG)
        logger = setup_logging(logging.DEBUG, log_file=str(log_file))

        assert logger.name == "untangly"
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG

        DiagramModel().start()
        for handler in logger.handlers:
            handler.flush()
        assert "Created single node at (0, 0)" in log_file.read_text(encoding="utf-8")

        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
