from rich import print

from untangly import AsciiRenderer, DiagramModel, FlowchartController, default_catalog


def main() -> None:
    catalog = default_catalog()
    renderer = AsciiRenderer(catalog=catalog)
    model = DiagramModel(renderer=renderer, layout=renderer.layout)
    model.start()
    controller = FlowchartController(model, catalog=catalog)

    controller.request_engage(0, 0, "terminator")
    controller.request_engage(0, -1, "process")
    controller.request_engage(0, -2, "decision")
    controller.request_engage(1, -2, "data")

    print(renderer.render(include_markup=True))
    print(f"\n[bold]bound[/bold] {model.bound.as_dict()}  [bold]nodes[/bold] {len(model)}")


if __name__ == "__main__":
    main()
