"""
Daily Quotes - Web View

A simple Flask-based page showing a random quote, tag filters, favorite
and share buttons, and a history sidebar. The page forwards every user
action to the JSON API below and re-renders from the returned state.

Run with: python -m web.app
Or: python main.py --serve
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flask import Flask, render_template, jsonify

from daily_quotes.config import DEBUG, WEB_HOST, WEB_PORT
from daily_quotes.controller import QuoteController
from daily_quotes.log import configure_logging
from daily_quotes.providers import QuotableProvider
from daily_quotes.share import COPIED_NOTICE
from daily_quotes.state import InvalidIntentError

logger = logging.getLogger(__name__)

app = Flask(__name__)


# =============================================================================
# Controller Wiring
# =============================================================================

# The one controller whose state this app renders
_controller: Optional[QuoteController] = None
_controller_lock = threading.Lock()


def init_controller(controller: Optional[QuoteController]) -> None:
    """Install the controller the routes operate on (None resets)."""
    global _controller
    with _controller_lock:
        _controller = controller


def get_controller() -> QuoteController:
    """Get the controller, creating and starting the default one on first use."""
    global _controller
    with _controller_lock:
        if _controller is None:
            _controller = QuoteController(QuotableProvider())
            _controller.start()
        return _controller


def _state_response(status: int = 200):
    return jsonify(get_controller().state.to_dict()), status


def _error_response(message: str, status: int = 400):
    return jsonify({"success": False, "error": message}), status


@app.errorhandler(InvalidIntentError)
def handle_invalid_intent(error):
    logger.info("Rejected request: %s", error)
    return _error_response(str(error), 400)


# =============================================================================
# Page
# =============================================================================

@app.route("/")
def index():
    """Main quote page."""
    controller = get_controller()
    return render_template(
        "index.html",
        state=controller.state,
        tags=controller.tags,
    )


# =============================================================================
# State API
# =============================================================================

@app.route("/api/state")
def api_state():
    """Current state snapshot (the page polls this while loading)."""
    return _state_response()


@app.route("/api/tags")
def api_tags():
    """Recognized tag catalog in display order."""
    controller = get_controller()
    return jsonify({
        "tags": [{"name": tag, "label": tag_label(tag)} for tag in controller.tags],
        "selected": controller.state.selected_tag,
    })


@app.route("/api/quote/refresh", methods=["POST"])
def api_refresh():
    """Fetch a new quote with the selected tag."""
    get_controller().refresh()
    return _state_response(202)


@app.route("/api/tags/<tag>", methods=["POST"])
def api_select_tag(tag):
    """Select a tag and fetch a quote for it."""
    get_controller().select_tag(tag)
    return _state_response(202)


@app.route("/api/favorite/toggle", methods=["POST"])
def api_toggle_favorite():
    get_controller().toggle_favorite()
    return _state_response()


@app.route("/api/history/toggle", methods=["POST"])
def api_toggle_history():
    get_controller().toggle_history()
    return _state_response()


@app.route("/api/history/close", methods=["POST"])
def api_close_history():
    get_controller().close_history()
    return _state_response()


@app.route("/api/history/<int:index>", methods=["POST"])
def api_select_from_history(index):
    """Show a quote from the history sidebar and close it."""
    get_controller().select_from_history(index)
    return _state_response()


@app.route("/api/share", methods=["POST"])
def api_share():
    """
    Return the share text for the displayed quote.

    The browser performs the actual share: native share when the platform
    offers it, else clipboard copy with the returned notice.
    """
    text = get_controller().share()
    if text is None:
        return _error_response("No quote to share", 400)

    return jsonify({
        "success": True,
        "text": text,
        "notice": COPIED_NOTICE,
    })


# =============================================================================
# Template Filters
# =============================================================================

@app.template_filter("tag_label")
def tag_label(tag):
    """Display label for a tag: first letter upper-cased."""
    if not tag:
        return ""
    return tag[0].upper() + tag[1:]


def run(host: str = WEB_HOST, port: int = WEB_PORT, debug: bool = DEBUG) -> None:
    """Start the development server."""
    configure_logging()
    print("=" * 50)
    print("Daily Quotes")
    print("=" * 50)
    print(f"Open http://{host}:{port} in your browser")
    print("Press Ctrl+C to stop")
    print("=" * 50)
    # The reloader would start a second controller in the child process
    app.run(host=host, port=port, debug=debug, use_reloader=False)


if __name__ == "__main__":
    run()
