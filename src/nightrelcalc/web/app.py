"""Flask web interface for the night release calculator.

Two routes:
- ``/`` renders the form, prefilled from the query string, and shows results
  inline when a start and a positive length are present.
- ``/calc`` validates a submitted form and redirects to ``/`` with a query
  string that only carries values differing from the form defaults.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

from flask import Flask, redirect, render_template, request

from nightrelcalc.config import DEFAULT_CONFIG, AppConfig, WebDefaults
from nightrelcalc.domain.clock import parse_decimal_hours
from nightrelcalc.domain.models import CalcResult
from nightrelcalc.errors import ValidationError
from nightrelcalc.output.text_generator import build_share_description
from nightrelcalc.scheduling.calculator import compute


@dataclass
class PageData:
    """Values rendered into the form page."""

    start: str = ""
    length: str = ""
    combine: str = ""
    normal_start: str = ""
    normal_end: str = ""
    min_rest: str = ""
    max_overtime: str = ""
    full: str = "(auto)"
    version: str = ""
    error: str = ""
    result: Optional[CalcResult] = None
    share_description: str = ""


def _or_default(value: Optional[str], default: str) -> str:
    value = (value or "").strip()
    return value or default


def _try_hours(value: str) -> Optional[float]:
    try:
        return parse_decimal_hours(value)
    except ValidationError:
        return None


def build_calc_url(
    start: str,
    length: str,
    combine: str,
    normal_start: str,
    normal_end: str,
    min_rest: str,
    max_overtime: str,
    defaults: WebDefaults = WebDefaults(),
) -> str:
    """Build ``/?start=..&length=..`` adding other values only when not default."""
    params = {"start": start, "length": length}
    if combine:
        params["combine"] = combine
    optional = [
        ("normal_start", normal_start, defaults.normal_start),
        ("normal_end", normal_end, defaults.normal_end),
        ("min_rest", min_rest, defaults.min_rest),
        ("max_overtime", max_overtime, defaults.max_overtime),
    ]
    for key, value, default in optional:
        if value and value != default:
            params[key] = value
    return "/?" + urlencode(sorted(params.items()))


def create_app(config: AppConfig = DEFAULT_CONFIG) -> Flask:
    """Create the Flask application.

    Args:
        config: Defaults for the form and fallbacks for invalid query values.
    """
    app = Flask(__name__)
    app.config["NIGHTRELCALC"] = config
    web = config.web
    fallback = config.calculator

    @app.route("/")
    def index():
        q = request.args
        data = PageData(
            start=_or_default(q.get("start"), web.start),
            length=_or_default(q.get("length"), web.length),
            combine=(q.get("combine") or "").strip(),
            normal_start=_or_default(q.get("normal_start"), web.normal_start),
            normal_end=_or_default(q.get("normal_end"), web.normal_end),
            min_rest=_or_default(q.get("min_rest"), web.min_rest),
            max_overtime=_or_default(q.get("max_overtime"), web.max_overtime),
            version=config.version,
        )

        length_h = _try_hours(data.length)
        if data.start and length_h is not None and length_h > 0:
            min_rest_h = _try_hours(data.min_rest)
            if min_rest_h is None or min_rest_h <= 0:
                min_rest_h = fallback.min_rest_hours
            max_overtime_h = _try_hours(data.max_overtime)
            if max_overtime_h is None or max_overtime_h < 0:
                max_overtime_h = fallback.max_overtime_hours
            combine_h = _try_hours(data.combine) if data.combine else None
            if combine_h is not None and combine_h < 0:
                combine_h = None

            try:
                result = compute(
                    data.start,
                    length_h,
                    combine_hours=combine_h,
                    normal_start=data.normal_start,
                    normal_end=data.normal_end,
                    min_rest_hours=min_rest_h,
                    max_overtime_hours=max_overtime_h,
                )
            except ValidationError as exc:
                data.error = str(exc)
            else:
                data.result = result
                data.full = result.summary()["full_day"]
                data.share_description = build_share_description(result)

        return render_template("index.html", page=data)

    @app.route("/calc", methods=["POST"])
    def calc():
        form = request.form
        start = form.get("start", "").strip()
        length = form.get("length", "").strip()
        combine = form.get("combine", "").strip()
        normal_start = form.get("normal_start", "").strip()
        normal_end = form.get("normal_end", "").strip() or web.normal_end
        min_rest = form.get("min_rest", "").strip()
        max_overtime = form.get("max_overtime", "").strip()

        data = PageData(
            start=start,
            length=length,
            combine=combine,
            normal_start=normal_start,
            normal_end=normal_end,
            min_rest=min_rest,
            max_overtime=max_overtime,
            version=config.version,
        )

        def reject(message: str):
            app.logger.info("rejected calculation: %s", message)
            data.error = message
            return render_template("index.html", page=data)

        if not start:
            return reject("release start is required (HH:MM)")

        length_h = _try_hours(length)
        if length_h is None or length_h <= 0:
            return reject("release length must be > 0 (hours, e.g. 4)")

        normal_start = normal_start or web.normal_start
        min_rest = min_rest or web.min_rest
        max_overtime = max_overtime or web.max_overtime

        min_rest_h = _try_hours(min_rest)
        if min_rest_h is None or min_rest_h <= 0:
            return reject("min rest must be > 0 (hours, default 11)")

        max_overtime_h = _try_hours(max_overtime)
        if max_overtime_h is None or max_overtime_h < 0:
            return reject("max overtime must be >= 0 (hours, default 4)")

        combine_h = None
        if combine:
            combine_h = _try_hours(combine)
            if combine_h is None or combine_h < 0:
                return reject("combine must be >= 0 (hours) or empty")

        try:
            compute(
                start,
                length_h,
                combine_hours=combine_h,
                normal_start=normal_start,
                normal_end=normal_end,
                min_rest_hours=min_rest_h,
                max_overtime_hours=max_overtime_h,
            )
        except ValidationError as exc:
            return reject(str(exc))

        url = build_calc_url(
            start, length, combine, normal_start, normal_end, min_rest, max_overtime,
            defaults=web,
        )
        return redirect(url, code=302)

    return app
