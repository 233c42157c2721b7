"""initial_schema

Revision ID: 3c1e9a7d5b20
Revises:
Create Date: 2026-10-19 09:12:44.218031

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = '3c1e9a7d5b20'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

pet_type = postgresql.ENUM('dog', 'cat', name='pet_type', create_type=False)
recipe_category = postgresql.ENUM('meat', 'poultry', 'fish', 'treats', name='recipe_category', create_type=False)
cooking_type = postgresql.ENUM('raw', 'cooked', 'baked', 'mixed', name='cooking_type', create_type=False)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    # 1. Enum types shared by pets and recipes
    bind = op.get_bind()
    pet_type.create(bind, checkfirst=True)
    recipe_category.create(bind, checkfirst=True)
    cooking_type.create(bind, checkfirst=True)

    # 2. Users
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('state', sa.String(length=100), nullable=True),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('profile_image_url', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('username', name='uq_users_username'),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )

    # 3. Pets
    op.create_table(
        'pets',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('type', pet_type, nullable=False),
        sa.Column('breed', sa.String(length=100), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Integer(), nullable=True),
        sa.Column('profile_image_url', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_pets_user_id_users', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_pets'),
    )
    op.create_index('ix_pets_user_id', 'pets', ['user_id'])

    # 4. Recipes
    op.create_table(
        'recipes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('ingredients', sa.Text(), nullable=False),
        sa.Column('instructions', sa.Text(), nullable=False),
        sa.Column('pet_type', pet_type, nullable=False),
        sa.Column('category', recipe_category, nullable=False),
        sa.Column('cooking_type', cooking_type, nullable=False),
        sa.Column('prep_time', sa.Integer(), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column('youtube_url', sa.String(length=500), nullable=True),
        sa.Column('cook_count', sa.Integer(), server_default='0', nullable=False),
        *_timestamps(),
        sa.CheckConstraint('prep_time > 0', name='ck_recipes_prep_time_positive'),
        sa.CheckConstraint('cook_count >= 0', name='ck_recipes_cook_count_non_negative'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_recipes_user_id_users', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_recipes'),
    )
    op.create_index('ix_recipes_user_id', 'recipes', ['user_id'])
    op.create_index('ix_recipes_pet_type', 'recipes', ['pet_type'])
    op.create_index('ix_recipes_category', 'recipes', ['category'])
    op.create_index('ix_recipes_created_at', 'recipes', ['created_at'])

    # 5. Comments (self-referencing replies)
    op.create_table(
        'comments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('parent_id', sa.Integer(), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_comments_user_id_users', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id'], name='fk_comments_recipe_id_recipes', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['parent_id'], ['comments.id'], name='fk_comments_parent_id_comments', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_comments'),
    )
    op.create_index('ix_comments_user_id', 'comments', ['user_id'])
    op.create_index('ix_comments_recipe_id', 'comments', ['recipe_id'])
    op.create_index('ix_comments_parent_id', 'comments', ['parent_id'])
    op.create_index('ix_comments_created_at', 'comments', ['created_at'])

    # 6. Favorites
    op.create_table(
        'favorites',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_favorites_user_id_users', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id'], name='fk_favorites_recipe_id_recipes', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_favorites'),
        sa.UniqueConstraint('user_id', 'recipe_id', name='uq_favorites_user_recipe'),
    )
    op.create_index('ix_favorites_user_id', 'favorites', ['user_id'])
    op.create_index('ix_favorites_recipe_id', 'favorites', ['recipe_id'])
    op.create_index('ix_favorites_created_at', 'favorites', ['created_at'])

    # 7. Followers
    op.create_table(
        'followers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('follower_id', sa.Integer(), nullable=False),
        sa.Column('following_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('follower_id <> following_id', name='ck_followers_no_self_follow'),
        sa.ForeignKeyConstraint(['follower_id'], ['users.id'], name='fk_followers_follower_id_users', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['following_id'], ['users.id'], name='fk_followers_following_id_users', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_followers'),
        sa.UniqueConstraint('follower_id', 'following_id', name='uq_followers_pair'),
    )
    op.create_index('ix_followers_follower_id', 'followers', ['follower_id'])
    op.create_index('ix_followers_following_id', 'followers', ['following_id'])
    op.create_index('ix_followers_created_at', 'followers', ['created_at'])

    # 8. Login sessions
    op.create_table(
        'user_sessions',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_user_sessions_user_id_users', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_user_sessions'),
    )
    op.create_index('ix_user_sessions_user_id', 'user_sessions', ['user_id'])
    op.create_index('ix_user_sessions_expires_at', 'user_sessions', ['expires_at'])


def downgrade() -> None:
    op.drop_table('user_sessions')
    op.drop_table('followers')
    op.drop_table('favorites')
    op.drop_table('comments')
    op.drop_table('recipes')
    op.drop_table('pets')
    op.drop_table('users')

    bind = op.get_bind()
    cooking_type.drop(bind, checkfirst=True)
    recipe_category.drop(bind, checkfirst=True)
    pet_type.drop(bind, checkfirst=True)
