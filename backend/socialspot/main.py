import os

from flask import Blueprint, abort, current_app, jsonify, send_from_directory

main = Blueprint('main', __name__)


@main.route('/health')
def health():
    stats = current_app.extensions['socialspot'].store.stats()
    return jsonify({'status': 'ok', **stats})


@main.route('/', defaults={'path': ''})
@main.route('/<path:path>')
def frontend(path):
    """Serve the built web client; unknown non-API paths fall back to index.html."""
    if path.startswith('api/'):
        abort(404)
    dist = current_app.config.get('FRONTEND_DIST')
    if not dist or not os.path.isdir(dist):
        return jsonify({'error': 'Frontend build not found'}), 404
    if path and os.path.isfile(os.path.join(dist, path)):
        return send_from_directory(dist, path)
    return send_from_directory(dist, 'index.html')
