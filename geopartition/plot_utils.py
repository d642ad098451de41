import numpy as np
import plotly
import plotly.graph_objects as go


def get_partition_plot(boxes: np.ndarray) -> plotly.graph_objects.Figure:
    fig = go.Figure()
    for ix, ((x1, y1), (x2, y2)) in enumerate(boxes):
        fig.add_trace(
            go.Scatter(
                x=[x1, x2, x2, x1, x1],
                y=[y1, y1, y2, y2, y1],
                mode="lines",
                fill="toself",
                name=str(ix),
                text=str(ix),
            )
        )
    fig.update_layout(xaxis_title="x", yaxis_title="y", showlegend=len(boxes) <= 64)
    fig.update_yaxes(scaleanchor="x", scaleratio=1)
    return fig
