"""
Admin Routes

Login, logout and CRUD screens for ranking records.
"""

from flask import render_template, request, redirect, url_for, flash, g, current_app
from ranking_admin.admin import admin_bp
from ranking_admin.admin.decorators import admin_required
from ranking_admin.services import (
    RankingCache, RankingDraft, RankingNotFound, RankingStoreError,
    create_ranking, delete_ranking, get_ranking, update_ranking, validate,
)
from ranking_admin.services.auth import authenticate, change_password, is_authenticated, logout


@admin_bp.route('', methods=['GET', 'POST'])
def login():
    """Admin login page, the only unguarded page under /admin."""
    if is_authenticated():
        return redirect(url_for('admin.ranking_list'))

    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')

        if not email or not password:
            flash('メールアドレスとパスワードを入力してください', 'danger')
            return render_template('admin/login.html', email=email), 400

        result = authenticate(email, password)
        if result.success:
            flash(f'ようこそ、{result.user.name}さん', 'success')
            return redirect(url_for('admin.ranking_list'))

        flash(result.error, 'danger')
        return render_template('admin/login.html', email=email), 401

    return render_template('admin/login.html')


@admin_bp.route('/logout', methods=['POST'])
def admin_logout():
    logout()
    flash('ログアウトしました', 'info')
    return redirect(url_for('admin.login'))


@admin_bp.route('/ranking')
@admin_required
def ranking_list():
    """Management table with search over every ranking."""
    query = request.args.get('q', '')
    cache = RankingCache()
    try:
        cache.refresh()
    except RankingStoreError:
        flash('データの取得に失敗しました', 'danger')

    return render_template('admin/ranking_list.html',
                         rankings=cache.filtered(query),
                         total=len(cache.records),
                         query=query,
                         admin=g.admin)


@admin_bp.route('/ranking/create', methods=['GET', 'POST'])
@admin_required
def ranking_create():
    draft = RankingDraft()
    errors = {}

    if request.method == 'POST':
        draft = RankingDraft.from_form(request.form)
        result = validate(draft)
        if result.valid:
            try:
                ranking = create_ranking(draft)
                flash(f'{ranking.account_name} を登録しました', 'success')
                return redirect(url_for('admin.ranking_list'))
            except RankingStoreError:
                flash('登録に失敗しました', 'danger')
        else:
            errors = result.errors
            flash('入力内容を確認してください', 'danger')

        return render_template('admin/ranking_form.html', mode='create', draft=draft,
                             errors=errors, admin=g.admin), 400

    return render_template('admin/ranking_form.html', mode='create', draft=draft,
                         errors=errors, admin=g.admin)


@admin_bp.route('/ranking/edit/<int:ranking_id>', methods=['GET', 'POST'])
@admin_required
def ranking_edit(ranking_id):
    try:
        ranking = get_ranking(ranking_id)
    except RankingNotFound:
        return render_template('admin/not_found.html', ranking_id=ranking_id, admin=g.admin), 404
    except RankingStoreError:
        flash('データの取得に失敗しました', 'danger')
        return redirect(url_for('admin.ranking_list'))

    if request.method == 'POST':
        draft = RankingDraft.from_form(request.form)
        result = validate(draft)
        errors = result.errors
        if result.valid:
            try:
                update_ranking(ranking_id, draft)
                flash(f'{draft.account_name} を更新しました', 'success')
                return redirect(url_for('admin.ranking_list'))
            except RankingNotFound:
                return render_template('admin/not_found.html', ranking_id=ranking_id, admin=g.admin), 404
            except RankingStoreError:
                flash('更新に失敗しました', 'danger')
        else:
            flash('入力内容を確認してください', 'danger')

        return render_template('admin/ranking_form.html', mode='edit', draft=draft,
                             ranking_id=ranking_id, errors=errors, admin=g.admin), 400

    return render_template('admin/ranking_form.html', mode='edit',
                         draft=RankingDraft.from_ranking(ranking),
                         ranking_id=ranking_id, errors={}, admin=g.admin)


@admin_bp.route('/ranking/delete/<int:ranking_id>', methods=['POST'])
@admin_required
def ranking_delete(ranking_id):
    try:
        delete_ranking(ranking_id)
        flash('削除しました', 'success')
    except RankingNotFound:
        flash('指定されたデータは存在しません', 'warning')
    except RankingStoreError:
        flash('削除に失敗しました', 'danger')

    return redirect(url_for('admin.ranking_list'))


@admin_bp.route('/account/password', methods=['GET', 'POST'])
@admin_required
def account_password():
    """Let the signed-in admin change their own password."""
    if request.method == 'POST':
        current_password = request.form.get('current_password', '')
        new_password = request.form.get('new_password', '')
        confirm_password = request.form.get('confirm_password', '')
        min_length = current_app.config.get('MIN_PASSWORD_LENGTH', 8)

        if len(new_password) < min_length:
            flash(f'新しいパスワードは{min_length}文字以上にしてください', 'danger')
        elif new_password != confirm_password:
            flash('新しいパスワードが一致しません', 'danger')
        else:
            result = change_password(g.admin.id, current_password, new_password)
            if result.success:
                flash('パスワードを変更しました', 'success')
                return redirect(url_for('admin.ranking_list'))
            flash(result.error, 'danger')

        return render_template('admin/password.html', admin=g.admin), 400

    return render_template('admin/password.html', admin=g.admin)
