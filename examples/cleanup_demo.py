import logging
from time import sleep

from rich.live import Live
from rich.panel import Panel

from untangly import AsciiRenderer, DiagramModel, FlowchartController, setup_logging


STEPS = [
    ("engage", 0, 0, "start"),
    ("engage", 0, 1, "up"),
    ("engage", 1, 1, "corner"),
    ("engage", 2, 1, "east"),
    ("engage", 2, 0, "down"),
    ("remove", 0, 1, None),
    ("remove", 0, 0, None),
    ("remove", 1, 1, None),
]


def main() -> None:
    setup_logging(logging.DEBUG, log_file="cleanup_demo.log")

    renderer = AsciiRenderer(box_style="square")
    model = DiagramModel(renderer=renderer, layout=renderer.layout)
    model.start()
    controller = FlowchartController(model)

    with Live(refresh_per_second=4, screen=False) as live:
        for action, x, y, label in STEPS:
            if action == "engage":
                controller.request_engage(x, y, label)
            else:
                controller.request_remove(x, y)
            live.update(
                Panel(
                    renderer.render(include_markup=True),
                    title=f"{action} ({x}, {y})",
                    subtitle=f"{len(model)} nodes",
                )
            )
            sleep(0.8)


if __name__ == "__main__":
    main()
