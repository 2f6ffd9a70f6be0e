"""Chart endpoint."""

from __future__ import annotations

from flask import Response, current_app, render_template, request

from bouncerstats.services import reshape
from bouncerstats.services.queries import build_query

from . import bp, get_datastore, get_renderer
from .helpers import build_params

SVG_MIMETYPE = "image/svg+xml"

PIE_SUBTITLES = {
    "pie_by_product": "by product",
    "pie_by_language": "by language",
    "pie_by_os": "by OS",
    "pie_by_oswa": "by OS and architecture",
}


@bp.route("/chart", methods=["GET", "POST"])
def chart():
    """Download count, pie chart or line chart for the requested filters."""
    config = current_app.config
    datastore = get_datastore()
    renderer = get_renderer()

    params = build_params(request.values, datastore, config["VALID_TYPES"])
    sql, sql_params = build_query(params, datastore.table)
    df = datastore.run_query(sql, sql_params)

    charset = config["OUTPUT_CHARSET"]

    if params.kind == "count":
        html = render_template(
            "count.html",
            title=config["REPORT_TITLE"],
            total=reshape.count_total(df),
            charset=charset,
        )
        return Response(html, content_type=f"text/html; charset={charset}")

    if params.kind == "pie":
        if params.chart_type == "pie_by_os":
            labels, values = reshape.os_family_slices(df)
        else:
            labels, values = reshape.pie_slices(df)
        subtitle = PIE_SUBTITLES.get(params.chart_type)
        title = f"{renderer.title} {subtitle}" if subtitle else None
        svg = renderer.pie(labels, values, title=title)
    else:
        labels, series = reshape.line_series(df, params)
        svg = renderer.line(labels, series)

    return Response(svg, mimetype=SVG_MIMETYPE)
