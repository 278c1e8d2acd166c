import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated list, '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Points awarded per correct quiz answer
    QUIZ_REWARD_POINTS = int(os.environ.get('QUIZ_REWARD_POINTS', '10'))
    # Built web client; served as static files when present
    FRONTEND_DIST = os.environ.get('FRONTEND_DIST') or os.path.abspath(
        os.path.join(os.path.dirname(__file__), '..', 'frontend', 'dist')
    )
    # Place search proxy
    PLACES_UPSTREAM_ENABLED = os.environ.get('PLACES_UPSTREAM_ENABLED', '1') not in ('0', 'false', 'False')
    PLACES_SEARCH_RADIUS_M = int(os.environ.get('PLACES_SEARCH_RADIUS_M', '2000'))
    PLACES_TIMEOUT_SEC = int(os.environ.get('PLACES_TIMEOUT_SEC', '15'))
    PLACES_RESULT_LIMIT = int(os.environ.get('PLACES_RESULT_LIMIT', '20'))
    PLACES_USER_AGENT = os.environ.get('PLACES_USER_AGENT', 'SocialSpot/1.0')
    GEOCODER_URL = os.environ.get('GEOCODER_URL', 'https://nominatim.openstreetmap.org/search')
    POI_URL = os.environ.get('POI_URL', 'https://overpass-api.de/api/interpreter')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3001'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
