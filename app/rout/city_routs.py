from flask import Blueprint, request, jsonify
from app.exceptions import InvalidInputError
from app.repository.city_query import Page
from app.repository.city_repository import list_cities, search_cities, create_city, update_city, delete_city
from app.repository.translation_repository import translate_name, get_translation, create_translation, \
    update_translation, delete_translation
from app.service.city_service import parse_city, parse_new_translation, parse_translation_patch, parse_id, success

cities_blueprint = Blueprint('cities', __name__)


def _page_from_args() -> Page:
    return Page.parse(request.args.get('limit'), request.args.get('skip'))


def _translation_id() -> int:
    return parse_id(request.args.get('translationID'), "Translation ID")


# cities
@cities_blueprint.route('/all', methods=['GET'])
def get_cities():
    page = _page_from_args()
    cities, total = list_cities(page)
    return jsonify(success(cities, meta=page.to_meta(total)))


@cities_blueprint.route('/name', methods=['GET'])
def get_name():
    name = request.args.get('name', '')
    lang = request.args.get('lang', '')

    if request.args.get('mode') == 'translate':
        return jsonify(success(translate_name(name, lang)))

    if not name or not lang:
        raise InvalidInputError("Both 'name' and 'lang' parameters are required")

    page = _page_from_args()
    cities, total = search_cities(name, lang, page)
    return jsonify(success(cities, meta=page.to_meta(total)))


@cities_blueprint.route('', methods=['POST'])
def add_city():
    city = create_city(parse_city(request.get_json(silent=True)))
    return jsonify(success(city, message="New city added successfully"))


@cities_blueprint.route('/<int:city_id>', methods=['PATCH', 'PUT'])
def edit_city(city_id):
    city = update_city(city_id, parse_city(request.get_json(silent=True)))
    return jsonify(success(city, message="City updated successfully"))


@cities_blueprint.route('/<int:city_id>', methods=['DELETE'])
def remove_city(city_id):
    delete_city(city_id)
    return jsonify(success(message="City and associated translations deleted successfully"))


# translations
@cities_blueprint.route('/translations', methods=['POST'])
def add_translation():
    translation = create_translation(parse_new_translation(request.get_json(silent=True)))
    return jsonify(success(translation, message="New translation added successfully"))


@cities_blueprint.route('/translations', methods=['GET'])
def get_city_translation():
    return jsonify(success(get_translation(_translation_id())))


@cities_blueprint.route('/translations', methods=['PATCH', 'PUT'])
def edit_translation():
    translation_id = _translation_id()
    translation = update_translation(translation_id, parse_translation_patch(request.get_json(silent=True)))
    return jsonify(success(translation, message="Translation updated successfully"))


@cities_blueprint.route('/translations', methods=['DELETE'])
def remove_translation():
    delete_translation(_translation_id())
    return jsonify(success(message="Translation deleted successfully"))
