"""Place search proxy.

Resolves venues ("locals") near a coordinate or a free-text place name by
asking an OpenStreetMap geocoder and the Overpass points-of-interest API.
Any upstream failure is logged and answered with a static fallback list, so
the web client always gets something to show.
"""
import http.client
import json
import urllib.error
import urllib.parse
import urllib.request

from flask import Blueprint, current_app, jsonify, request

places = Blueprint('places', __name__)

FALLBACK_LOCALS = [
    {'id': '1', 'name': "Zé's Bar", 'type': 'Bar', 'description': 'Cold beer and snacks.'},
    {'id': '2', 'name': 'Neon Club', 'type': 'Boate', 'description': 'Electronic music and drinks.'},
    {'id': '3', 'name': 'Central Mall', 'type': 'Shopping', 'description': 'Food court and shops.'},
    {'id': '4', 'name': 'Sabor Restaurant', 'type': 'Restaurante', 'description': 'Home-style cooking.'},
]

AMENITY_TYPES = {
    'nightclub': 'Boate',
    'pub': 'Bar',
    'bar': 'Bar',
    'restaurant': 'Restaurante',
    'cafe': 'Café',
}
LEISURE_TYPES = {
    'fitness_centre': 'Academia',
    'park': 'Parque',
}
TYPE_DESCRIPTIONS = {
    'Academia': "Let's work out!",
    'Parque': 'Nature and open air.',
    'Café': 'Hot coffee and good conversation.',
}
DEFAULT_DESCRIPTION = 'A great place to socialize.'


class PlacesLookupError(Exception):
    """An upstream place service returned something unusable."""


def _get_json(url, params=None, timeout=15, user_agent=None):
    if params:
        url = f'{url}?{urllib.parse.urlencode(params)}'
    req = urllib.request.Request(url, headers={'User-Agent': user_agent or 'SocialSpot/1.0'})
    with urllib.request.urlopen(req, timeout=timeout) as resp:
        return json.loads(resp.read().decode('utf-8'))


def geocode(term, config):
    """Return ``(lat, lng)`` for a place name, or None when nothing matched."""
    results = _get_json(
        config['GEOCODER_URL'],
        {'q': term, 'format': 'json', 'limit': 1},
        timeout=config['PLACES_TIMEOUT_SEC'],
        user_agent=config['PLACES_USER_AGENT'],
    )
    if not isinstance(results, list):
        raise PlacesLookupError('geocoder reply is not a list')
    if not results:
        return None
    first = results[0]
    return first['lat'], first['lon']


def build_poi_query(lat, lng, radius, limit, timeout):
    around = f'around:{radius},{lat},{lng}'
    return (
        f'[out:json][timeout:{timeout}];'
        '('
        f'node["amenity"~"bar|pub|restaurant|nightclub|cafe"]({around});'
        f'way["amenity"~"bar|pub|restaurant|nightclub|cafe"]({around});'
        f'node["leisure"~"fitness_centre|park"]({around});'
        f'way["leisure"~"fitness_centre|park"]({around});'
        ');'
        f'out center {limit};'
    )


def element_to_local(element):
    """Map one Overpass element to a local dict; None for unnamed places."""
    tags = element.get('tags') or {}
    name = tags.get('name')
    if not name:
        return None

    place_type = AMENITY_TYPES.get(tags.get('amenity')) or LEISURE_TYPES.get(tags.get('leisure')) or 'Local'

    if tags.get('cuisine'):
        description = f"Cuisine: {tags['cuisine']}"
    elif place_type in TYPE_DESCRIPTIONS:
        description = TYPE_DESCRIPTIONS[place_type]
    elif tags.get('description'):
        description = tags['description']
    else:
        description = DEFAULT_DESCRIPTION

    return {
        'id': str(element.get('id')),
        'name': name,
        'type': place_type,
        'description': description,
    }


def nearby_locals(lat, lng, config):
    query = build_poi_query(
        lat, lng,
        radius=config['PLACES_SEARCH_RADIUS_M'],
        limit=config['PLACES_RESULT_LIMIT'],
        timeout=config['PLACES_TIMEOUT_SEC'],
    )
    reply = _get_json(
        config['POI_URL'],
        {'data': query},
        timeout=config['PLACES_TIMEOUT_SEC'],
        user_agent=config['PLACES_USER_AGENT'],
    )
    elements = reply.get('elements') if isinstance(reply, dict) else None
    if not isinstance(elements, list):
        raise PlacesLookupError('POI reply has no elements list')
    found = (element_to_local(el) for el in elements if isinstance(el, dict))
    return [local for local in found if local is not None]


def search_locals(lat=None, lng=None, search=None, config=None):
    """Resolve locals for the query; raises on upstream failure."""
    if not lat and not lng and not search:
        return []
    if search and (not lat or not lng):
        coords = geocode(search, config)
        if coords is None:
            return []
        lat, lng = coords
    return nearby_locals(lat, lng, config)


@places.route('/locais', methods=['GET'])
@places.route('/locals', methods=['GET'])
def list_locals():
    lat = request.args.get('lat')
    lng = request.args.get('lng')
    search = request.args.get('search')
    if not lat and not lng and not search:
        return jsonify([])

    config = current_app.config
    if not config.get('PLACES_UPSTREAM_ENABLED', True):
        return jsonify(FALLBACK_LOCALS)
    try:
        return jsonify(search_locals(lat, lng, search, config))
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError, KeyError,
            PlacesLookupError) as exc:
        current_app.logger.warning(f"[places] upstream lookup failed, using fallback: {exc}")
        return jsonify(FALLBACK_LOCALS)
