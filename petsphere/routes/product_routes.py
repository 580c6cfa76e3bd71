from flask import Blueprint, request

from ..utils.context import get_storage

bp = Blueprint('products', __name__, url_prefix='/api/products')


def format_product(product):
    data = product.model_dump(mode='json')
    data['effectivePrice'] = product.effective_price
    return data


@bp.route('', methods=['GET'])
def list_products():
    """List products, optionally filtered by category, subCategory or featured"""
    storage = get_storage()
    category = request.args.get('category')
    sub_category = request.args.get('subCategory')
    featured = request.args.get('featured')

    if category:
        products = storage.get_products_by_category(category)
    elif sub_category:
        products = storage.get_products_by_sub_category(sub_category)
    elif featured == 'true':
        products = storage.get_featured_products()
    else:
        products = storage.get_products()
    return [format_product(p) for p in products], 200


@bp.route('/<int:product_id>', methods=['GET'])
def get_product(product_id):
    product = get_storage().get_product(product_id)
    if product is None:
        return {'message': 'Product not found'}, 404
    return format_product(product), 200
