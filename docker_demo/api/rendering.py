"""HTML rendering for the landing page."""

from html import escape
from string import Template

from docker_demo.domain import AppMetadata, RuntimeSnapshot

_LANDING_PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html lang="ru">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>$application_name</title>
    <style>
        body {
            font-family: 'Segoe UI', Arial, sans-serif;
            background: linear-gradient(135deg, #1a1a2e 0%, #16213e 100%);
            color: #eee;
            min-height: 100vh;
            margin: 0;
            display: flex;
            justify-content: center;
            align-items: center;
        }
        .container {
            background: rgba(255,255,255,0.1);
            backdrop-filter: blur(10px);
            border-radius: 20px;
            padding: 40px;
            box-shadow: 0 8px 32px rgba(0,0,0,0.3);
            max-width: 600px;
            text-align: center;
        }
        h1 { color: #4ecca3; margin-bottom: 10px; }
        .emoji { font-size: 48px; }
        .info {
            background: rgba(78, 204, 163, 0.2);
            border-radius: 10px;
            padding: 20px;
            margin: 20px 0;
        }
        .info p { margin: 10px 0; }
        .label { color: #4ecca3; font-weight: bold; }
        .success { color: #4ecca3; font-size: 1.2em; font-weight: bold; }
        .footer { color: #888; font-size: 0.9em; }
    </style>
</head>
<body>
    <div class="container">
        <div class="emoji">🐳</div>
        <h1>$application_name</h1>
        <p class="success">✅ Приложение успешно запущено в Docker контейнере!</p>

        <div class="info">
            <p><span class="label">⏰ Время сервера:</span> <span id="timestamp">$timestamp</span></p>
            <p><span class="label">🖥️ Hostname:</span> <span id="hostname">$hostname</span></p>
            <p><span class="label">📦 Версия:</span> <span id="version">$application_version</span></p>
            <p><span class="label">👨‍💻 Разработчик:</span> <span id="developer">$developer_name</span></p>
        </div>

        <p class="footer">FastAPI + Docker | Python $runtime_version</p>
    </div>
</body>
</html>
"""
)


def api_render_landing_page(metadata: AppMetadata, snapshot: RuntimeSnapshot) -> str:
    """Render the landing page document.

    Args:
        metadata: Static application metadata.
        snapshot: Host values read for the current request.

    Returns:
        str: Complete HTML document with escaped values.
    """

    return _LANDING_PAGE_TEMPLATE.substitute(
        application_name=escape(metadata.application_name),
        application_version=escape(metadata.application_version),
        developer_name=escape(metadata.developer_name),
        runtime_version=escape(metadata.runtime_version),
        timestamp=escape(snapshot.timestamp),
        hostname=escape(snapshot.hostname),
    )
