"""HTTP endpoint: POST a video ID, get back its Markdown summary."""

import json
import logging
import os
from typing import Callable, Optional, Tuple, Union
from flask import Flask, jsonify, request

from yt2md.config import Config
from yt2md.pipeline import acquire as default_acquire
from yt2md.summarizer import create_summary

logger = logging.getLogger(__name__)

Response = Tuple[int, dict, dict]


def _error(status: int, message: str, headers: Optional[dict] = None) -> Response:
    return status, {'error': message}, headers or {}


def handle_summarize(
    method: str,
    body: Optional[Union[str, bytes]],
    config: Config,
    acquire: Callable = default_acquire,
    summarize: Callable = create_summary,
    log: logging.Logger = logger,
) -> Response:
    """
    Handle one summarize request.

    Args:
        method: HTTP method
        body: Raw request body, expected to be JSON ``{"videoId": ...}``
        config: Configuration passed to the pipeline and summarizer
        acquire: Transcript pipeline, ``(video_id, config=...) -> TranscriptResult``
        summarize: Summarizer, ``(text, config) -> Optional[str]``

    Returns:
        Tuple of (status code, JSON payload, extra headers)
    """
    if method != 'POST':
        return _error(405, 'Method Not Allowed', {'Allow': 'POST'})

    try:
        request_body = {}
        if body:
            try:
                request_body = json.loads(body)
            except ValueError as e:
                log.error("Error parsing request body: %s", e)
                return _error(400, 'Invalid JSON body')
        else:
            log.info("Request body is empty or null.")

        video_id = request_body.get('videoId') if isinstance(request_body, dict) else None
        if not video_id:
            log.error("Video ID missing from request body.")
            return _error(400, 'Video ID is required in the request body')

        # 1. Fetch transcript
        log.info("[summarize] Fetching transcript for videoId: %s", video_id)
        result = acquire(video_id, config=config)

        if not result.ok:
            log.error("[summarize] Error fetching transcript: %s", result.error)
            status = 400 if "Invalid YouTube Video ID" in result.error else 500
            return _error(status, result.error)

        full_text = result.full_text
        if not full_text:
            log.error("[summarize] Transcript is empty or missing for videoId: %s", video_id)
            return _error(500, 'Could not retrieve a non-empty transcript for this video.')

        # 2. Generate summary
        log.info("[summarize] Generating summary for videoId: %s", video_id)
        summary = summarize(full_text, config)
        if not summary:
            log.error("[summarize] Failed to generate summary for videoId: %s", video_id)
            return _error(500, 'Failed to generate summary')

        log.info("[summarize] Successfully generated summary for videoId: %s", video_id)
        payload = {}
        if result.title is not None:
            payload['title'] = result.title
        payload['videoId'] = video_id
        payload['summary'] = summary
        return 200, payload, {}

    except Exception as e:
        log.error("[summarize] Unhandled error processing request: %s", e)
        return _error(500, 'Internal Server Error')


def create_app(config: Optional[Config] = None, acquire: Callable = default_acquire,
               summarize: Callable = create_summary) -> Flask:
    """Build the Flask app serving ``/api/summarize``."""
    app = Flask(__name__)
    app.config['YT2MD'] = config or Config.from_env()

    def _json_response(status: int, payload: dict, headers: dict):
        response = jsonify(payload)
        response.status_code = status
        response.headers.update(headers)
        return response

    @app.errorhandler(405)
    def method_not_allowed(error):
        return _json_response(*_error(405, 'Method Not Allowed', {'Allow': 'POST'}))

    @app.route('/api/summarize', methods=['POST'], provide_automatic_options=False)
    def summarize_route():
        return _json_response(*handle_summarize(
            request.method,
            request.get_data(),
            app.config['YT2MD'],
            acquire=acquire,
            summarize=summarize,
            log=app.logger,
        ))

    return app


def main() -> None:
    """Run the development server."""
    app = create_app()
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")))


if __name__ == "__main__":
    main()
