"""
Public Routes

Ranked list with search and pagination, CSV download and a JSON feed.
"""

from flask import render_template, request, jsonify, current_app, Response
from ranking_admin.public import public_bp
from ranking_admin.services import RankingCache, RankingStoreError, to_csv


def _load_cache():
    cache = RankingCache(page_size=current_app.config['ITEMS_PER_PAGE'])
    cache.refresh()
    return cache


@public_bp.route('/')
def ranking_list():
    """Public ranking ordered by follower count."""
    query = request.args.get('q', '')
    page_number = request.args.get('page', 1, type=int)

    try:
        cache = _load_cache()
    except RankingStoreError:
        return render_template('public/error.html',
                             message='データの取得に失敗しました'), 503

    page = cache.view(query, page_number)
    return render_template('public/ranking_list.html',
                         page=page,
                         query=query,
                         has_rankings=bool(cache.records))


@public_bp.route('/ranking.csv')
def ranking_csv():
    """Download the currently filtered ranking, every page included."""
    query = request.args.get('q', '')
    try:
        cache = _load_cache()
    except RankingStoreError:
        return Response('データの取得に失敗しました', status=503, mimetype='text/plain')

    filename = current_app.config['CSV_FILENAME']
    return Response(
        to_csv(cache.filtered(query)),
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename={filename}'},
    )


@public_bp.route('/api/rankings')
def api_rankings():
    query = request.args.get('q', '')
    try:
        cache = _load_cache()
    except RankingStoreError:
        return jsonify({'error': 'データの取得に失敗しました'}), 503

    return jsonify([
        dict(r.to_dict(), rank=rank)
        for rank, r in enumerate(cache.filtered(query), start=1)
    ])
