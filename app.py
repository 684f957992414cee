"""
Ranking MK2 server

Builds the ranking console with the default Config. The public ranking is
served at / and the admin console at /admin. Use `flask --app app run` or
run this file directly for a local debug server.
"""

from ranking_admin import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
