# migrations/versions/001_initial_migration.py

"""Initial migration with all tables

Revision ID: 001
Revises:
Create Date: 2025-06-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    # Replay protection for x-fused-key
    op.create_table('used_auth_keys',
                    sa.Column('id', sa.String(), nullable=False),
                    sa.Column('fused_key', sa.String(), nullable=False),
                    sa.Column('random_string', sa.String(), nullable=False),
                    sa.Column('ip_address', sa.String(), nullable=False),
                    sa.Column('used_at', sa.DateTime(), nullable=False),
                    *_timestamps(),
                    sa.PrimaryKeyConstraint('id'),
                    )
    op.create_index('ix_used_auth_keys_fused_key', 'used_auth_keys', ['fused_key'], unique=True)
    op.create_index('ix_used_auth_keys_used_at', 'used_auth_keys', ['used_at'])

    # Counter leaderboard
    op.create_table('counter_leaderboard',
                    sa.Column('fid', sa.BigInteger(), autoincrement=False, nullable=False),
                    sa.Column('username', sa.String(), nullable=False),
                    sa.Column('image_url', sa.String(), nullable=False),
                    sa.Column('user_address', sa.String(), nullable=False),
                    sa.Column('total_increments', sa.Integer(), nullable=False),
                    sa.Column('total_rewards', sa.Float(), nullable=False),
                    sa.Column('last_update_at', sa.DateTime(), nullable=False),
                    *_timestamps(),
                    sa.PrimaryKeyConstraint('fid'),
                    )
    op.create_index('ix_counter_leaderboard_user_address', 'counter_leaderboard', ['user_address'])
    op.create_index('ix_counter_leaderboard_total_increments', 'counter_leaderboard', ['total_increments'])

    # Neynar profile cache
    op.create_table('counter_users',
                    sa.Column('fid', sa.BigInteger(), autoincrement=False, nullable=False),
                    sa.Column('user_data', sa.JSON(), nullable=False),
                    sa.Column('cached_at', sa.DateTime(), nullable=False),
                    *_timestamps(),
                    sa.PrimaryKeyConstraint('fid'),
                    )
    op.create_index('ix_counter_users_cached_at', 'counter_users', ['cached_at'])

    # Game scores
    op.create_table('game_scores',
                    sa.Column('fid', sa.BigInteger(), autoincrement=False, nullable=False),
                    sa.Column('pfp_url', sa.String(), nullable=False),
                    sa.Column('username', sa.String(), nullable=True),
                    sa.Column('user_address', sa.String(), nullable=True),
                    sa.Column('score', sa.Integer(), nullable=False),
                    sa.Column('current_season_score', sa.Integer(), nullable=True),
                    sa.Column('level', sa.Integer(), nullable=False),
                    sa.Column('duration', sa.Integer(), nullable=True),
                    sa.Column('last_game_at', sa.DateTime(), nullable=True),
                    sa.Column('nft_name', sa.String(), nullable=True),
                    sa.Column('nft_count', sa.Integer(), nullable=False),
                    sa.Column('has_nft', sa.Boolean(), nullable=False),
                    sa.Column('last_nft_mint_at', sa.DateTime(), nullable=True),
                    sa.Column('faucet_claimed', sa.Boolean(), nullable=False),
                    sa.Column('has_minted_today', sa.Boolean(), nullable=False),
                    sa.Column('last_mint_date', sa.String(length=10), nullable=True),
                    sa.Column('daily_streak', sa.Integer(), nullable=False),
                    sa.Column('last_play_date', sa.String(length=10), nullable=True),
                    sa.Column('longest_streak', sa.Integer(), nullable=False),
                    sa.Column('gift_box_claims_in_period', sa.Integer(), nullable=False),
                    sa.Column('last_gift_box_at', sa.DateTime(), nullable=True),
                    sa.Column('total_rewards_claimed', sa.Integer(), nullable=False),
                    *_timestamps(),
                    sa.PrimaryKeyConstraint('fid'),
                    )
    op.create_index('ix_game_scores_user_address', 'game_scores', ['user_address'])
    op.create_index('ix_game_scores_score', 'game_scores', ['score'])
    op.create_index('ix_game_scores_current_season_score', 'game_scores', ['current_season_score'])

    # NFT mints
    op.create_table('user_mints',
                    sa.Column('id', sa.String(), nullable=False),
                    sa.Column('user_address', sa.String(), nullable=False),
                    sa.Column('score', sa.Integer(), nullable=False),
                    sa.Column('token_id', sa.Integer(), nullable=True),
                    sa.Column('trait', sa.String(), nullable=True),
                    sa.Column('signature', sa.Text(), nullable=False),
                    sa.Column('minted_at', sa.DateTime(), nullable=False),
                    *_timestamps(),
                    sa.PrimaryKeyConstraint('id'),
                    )
    op.create_index('ix_user_mints_user_address', 'user_mints', ['user_address'])
    op.create_index('ix_user_mints_score', 'user_mints', ['score'])
    op.create_index('ix_user_mints_minted_at', 'user_mints', ['minted_at'])

    op.create_table('daily_mint_counts',
                    sa.Column('id', sa.String(), nullable=False),
                    sa.Column('user_address', sa.String(), nullable=False),
                    sa.Column('date', sa.String(length=10), nullable=False),
                    sa.Column('count', sa.Integer(), nullable=False),
                    sa.Column('last_mint_at', sa.DateTime(), nullable=False),
                    *_timestamps(),
                    sa.PrimaryKeyConstraint('id'),
                    sa.UniqueConstraint('user_address', 'date', name='uq_daily_mint_address_date'),
                    )
    op.create_index('ix_daily_mint_counts_user_address', 'daily_mint_counts', ['user_address'])

    # Gift boxes
    op.create_table('gift_box_claims',
                    sa.Column('id', sa.String(), nullable=False),
                    sa.Column('user_address', sa.String(), nullable=False),
                    sa.Column('fid', sa.BigInteger(), nullable=False),
                    sa.Column('token_type', sa.String(), nullable=False),
                    sa.Column('amount', sa.Float(), nullable=False),
                    sa.Column('amount_units', sa.String(), nullable=False),
                    sa.Column('signature', sa.Text(), nullable=True),
                    sa.Column('transaction_hash', sa.String(), nullable=True),
                    sa.Column('claimed_at', sa.DateTime(), nullable=False),
                    *_timestamps(),
                    sa.PrimaryKeyConstraint('id'),
                    )
    op.create_index('ix_gift_box_claims_user_address', 'gift_box_claims', ['user_address'])
    op.create_index('ix_gift_box_claims_fid', 'gift_box_claims', ['fid'])
    op.create_index('ix_gift_box_claims_claimed_at', 'gift_box_claims', ['claimed_at'])

    # Faucet payouts
    op.create_table('faucet_claims',
                    sa.Column('id', sa.String(), nullable=False),
                    sa.Column('user_address', sa.String(), nullable=False),
                    sa.Column('amount', sa.String(), nullable=False),
                    sa.Column('transaction_hash', sa.String(), nullable=False),
                    sa.Column('block_number', sa.BigInteger(), nullable=False),
                    sa.Column('wallet_index', sa.Integer(), nullable=True),
                    sa.Column('claimed_at', sa.DateTime(), nullable=False),
                    *_timestamps(),
                    sa.PrimaryKeyConstraint('id'),
                    sa.UniqueConstraint('transaction_hash'),
                    )
    op.create_index('ix_faucet_claims_user_address', 'faucet_claims', ['user_address'])
    op.create_index('ix_faucet_claims_wallet_index', 'faucet_claims', ['wallet_index'])

    # Social follow actions
    op.create_table('follow_actions',
                    sa.Column('id', sa.String(), nullable=False),
                    sa.Column('user_address', sa.String(), nullable=False),
                    sa.Column('fid', sa.Integer(), nullable=True),
                    sa.Column('platform', sa.String(length=16), nullable=False),
                    sa.Column('reward_claimed', sa.Boolean(), nullable=False),
                    sa.Column('followed_at', sa.DateTime(), nullable=False),
                    *_timestamps(),
                    sa.PrimaryKeyConstraint('id'),
                    sa.UniqueConstraint('user_address', 'platform', name='uq_follow_address_platform'),
                    )
    op.create_index('ix_follow_actions_user_address', 'follow_actions', ['user_address'])


def downgrade() -> None:
    op.drop_table('follow_actions')
    op.drop_table('faucet_claims')
    op.drop_table('gift_box_claims')
    op.drop_table('daily_mint_counts')
    op.drop_table('user_mints')
    op.drop_table('game_scores')
    op.drop_table('counter_users')
    op.drop_table('counter_leaderboard')
    op.drop_table('used_auth_keys')
