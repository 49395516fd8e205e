import os
import logging
import json
from pathlib import Path
from flask import Flask, request, jsonify, Response
from flask_cors import CORS
from pydantic import ValidationError
from dotenv import load_dotenv

from schemas.dto import RecipeRequest
from services.recipes import lookup_recipe, fallback_recipe

load_dotenv()

HERE = Path(__file__).resolve().parent
ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",") if o.strip()
]

app = Flask(__name__)
CORS(app, resources={r"/api/*": {"origins": ALLOWED_ORIGINS}}, supports_credentials=True)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

def ok(payload: dict, status=200): return jsonify(payload), status
def err(code="BAD_REQUEST", message="bad request", status=400): return jsonify({"error": {"code": code, "message": message}}), status

# --- Routes ---

@app.get("/health")
def health(): return ok({"status": "ok"})

@app.post("/api/recipe")
def recipe():
    data = request.get_json(silent=True)
    try:
        payload = RecipeRequest(**(data if isinstance(data, dict) else {}))
    except ValidationError:
        return err(message="Keyword is required")

    try:
        result = lookup_recipe(payload.keyword)
    except Exception:
        app.logger.exception("Recipe lookup failed for %r", payload.keyword)
        result = fallback_recipe(payload.keyword)
    return ok(result.model_dump())

@app.get("/openapi.json")
def openapi():
    with open(HERE / "openapi.json", "r", encoding="utf-8") as f:
        return jsonify(json.load(f))

@app.get("/docs")
def docs():
    return Response("""
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="utf-8" />
        <title>API Docs</title>
        <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5.11.0/swagger-ui.css" />
    </head>
    <body>
        <div id="swagger-ui"></div>
        <script src="https://unpkg.com/swagger-ui-dist@5.11.0/swagger-ui-bundle.js"></script>
        <script>
        window.onload = () => {
            window.ui = SwaggerUIBundle({
                url: '/openapi.json',
                dom_id: '#swagger-ui',
            });
        };
        </script>
    </body>
    </html>
    """, mimetype="text/html")


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", 5000)), debug=True)
