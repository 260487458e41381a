from __future__ import annotations

from flask import Flask, jsonify

from ai_news.handler import CORS_HEADERS, handle_news_request

app = Flask(__name__)


@app.get("/health")
def healthcheck():
    return {"status": "ok"}


@app.route("/news", methods=["GET", "POST"])
def fetch_news():
    # Request body and query string are not used.
    status, body = handle_news_request()
    return jsonify(body), status, CORS_HEADERS


if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=8008)
