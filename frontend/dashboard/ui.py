"""
Gradio UI for the transaction dashboard.

Run (with the API on DASHBOARD_API_URL):
  python -m dashboard.ui
"""

import logging

import gradio as gr

from dashboard.charts import (
    TABLE_HEADERS,
    bar_chart_figure,
    pie_chart_figure,
    statistics_markdown,
    table_rows,
)
from dashboard.client import DashboardClient
from dashboard.config import settings
from dashboard.state import MONTH_NAMES, DashboardController


def new_controller() -> DashboardController:
    """One controller per browser session."""
    return DashboardController(DashboardClient())


def render(controller: DashboardController):
    """Turn the controller's state into component values."""
    state = controller.state
    return (
        controller,
        table_rows(state.transactions),
        f"Page {state.page}",
        statistics_markdown(state.month, state.statistics),
        bar_chart_figure(state.bar_chart_data),
        pie_chart_figure(state.pie_chart_data),
    )


def on_load(controller):
    controller.refresh()
    return render(controller)


def on_month(controller, month):
    controller.set_month(month)
    return render(controller)


def on_search_change(controller, search):
    controller.set_search(search)
    return render(controller)


def on_search_submit(controller, search):
    controller.submit_search(search)
    return render(controller)


def on_previous(controller):
    controller.previous_page()
    return render(controller)


def on_next(controller):
    controller.next_page()
    return render(controller)


def build_demo() -> gr.Blocks:
    with gr.Blocks(
        title="Transaction Dashboard",
        theme=gr.themes.Base(primary_hue="blue", neutral_hue="slate"),
    ) as demo:
        controller = gr.State(new_controller)

        gr.Markdown("# Transaction Dashboard")

        with gr.Row():
            month_input = gr.Dropdown(choices=MONTH_NAMES, value=settings.default_month, label="Select Month")
            search_input = gr.Textbox(
                label="Search",
                placeholder="Search transactions by title, description, or price...",
            )

        gr.Markdown("## Transactions")
        table = gr.Dataframe(headers=TABLE_HEADERS, interactive=False, wrap=True)

        with gr.Row():
            prev_btn = gr.Button("Previous")
            page_label = gr.Markdown("Page 1")
            next_btn = gr.Button("Next")

        stats_md = gr.Markdown()

        with gr.Row():
            bar_plot = gr.Plot(label="Bar Chart")
            pie_plot = gr.Plot(label="Pie Chart")

        outputs = [controller, table, page_label, stats_md, bar_plot, pie_plot]

        demo.load(fn=on_load, inputs=[controller], outputs=outputs)
        month_input.change(fn=on_month, inputs=[controller, month_input], outputs=outputs)
        search_input.change(fn=on_search_change, inputs=[controller, search_input], outputs=outputs)
        search_input.submit(fn=on_search_submit, inputs=[controller, search_input], outputs=outputs)
        prev_btn.click(fn=on_previous, inputs=[controller], outputs=outputs)
        next_btn.click(fn=on_next, inputs=[controller], outputs=outputs)

    return demo


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    build_demo().launch(server_name=settings.server_name, server_port=settings.server_port)
