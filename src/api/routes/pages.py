"""
Human-facing pages
==================

GET / -- small HTML form that calls ``/api/distance``
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])

INDEX_HTML = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>Distance Calculator</title>
    <style>
      body { font-family: Arial, sans-serif; padding: 20px; }
      input { margin: 4px 0; padding: 6px; width: 70px; }
      button { padding: 6px 12px; }
      #result { margin-top: 16px; font-weight: bold; }
    </style>
  </head>
  <body>
    <h1>Distance to (0,0,0)</h1>
    <form id="distForm" action="/api/distance" method="get">
      x: <input type="number" step="any" name="x" value="0"><br>
      y: <input type="number" step="any" name="y" value="0"><br>
      z: <input type="number" step="any" name="z" value="0"><br>
      <button type="submit">Calculate</button>
    </form>
    <p id="result"></p>

    <script>
      const form = document.getElementById("distForm");
      const result = document.getElementById("result");

      form.addEventListener("submit", async (e) => {
        e.preventDefault();
        const params = new URLSearchParams(new FormData(form));
        const r = await fetch("/api/distance?" + params);
        const json = await r.json();
        result.textContent = r.ok ? "Distance = " + json.distance : json.error;
      });
    </script>
  </body>
</html>
"""


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Distance calculator form",
    include_in_schema=False,
)
async def index() -> HTMLResponse:
    return HTMLResponse(INDEX_HTML)
