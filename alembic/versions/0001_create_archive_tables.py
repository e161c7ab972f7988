"""Create poem, submission, recording, favorite and user tables

Revision ID: 0001_archive
Revises: 
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_archive'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


submission_status = sa.Enum('pending', 'approved', 'rejected', name='submissionstatus')
user_role = sa.Enum('user', 'admin', name='userrole')


def upgrade() -> None:
    """Create the archive schema"""

    op.create_table('poems',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('external_link', sa.String(), nullable=False),
        sa.Column('context', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_poems_id', 'poems', ['id'])
    op.create_index('ix_poems_slug', 'poems', ['slug'], unique=True)

    op.create_table('submissions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('poem_id', sa.Integer(), nullable=False),
        sa.Column('reader_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('background', sa.Text(), nullable=True),
        sa.Column('interpretation_note', sa.Text(), nullable=True),
        sa.Column('anonymous', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('file_name', sa.String(), nullable=False),
        sa.Column('original_file_name', sa.String(), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('mime_type', sa.String(), nullable=False),
        sa.Column('file_url', sa.String(), nullable=True),
        sa.Column('status', submission_status, server_default='pending', nullable=False),
        sa.Column('approval_token', sa.String(), nullable=False),
        sa.Column('submitted_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('reviewed_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['poem_id'], ['poems.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_submissions_id', 'submissions', ['id'])
    op.create_index('ix_submissions_poem_id', 'submissions', ['poem_id'])
    op.create_index('ix_submissions_approval_token', 'submissions', ['approval_token'], unique=True)
    op.create_index('idx_submissions_status_submitted_at', 'submissions', ['status', 'submitted_at'])

    op.create_table('recordings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('poem_id', sa.Integer(), nullable=False),
        sa.Column('submission_id', sa.Integer(), nullable=False),
        sa.Column('reader_name', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('background', sa.Text(), nullable=True),
        sa.Column('interpretation_note', sa.Text(), nullable=True),
        sa.Column('anonymous', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('file_name', sa.String(), nullable=False),
        sa.Column('original_file_name', sa.String(), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('mime_type', sa.String(), nullable=False),
        sa.Column('file_url', sa.String(), nullable=True),
        sa.Column('approved_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['poem_id'], ['poems.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('submission_id')
    )
    op.create_index('ix_recordings_id', 'recordings', ['id'])
    op.create_index('ix_recordings_poem_id', 'recordings', ['poem_id'])
    op.create_index('ix_recordings_approved_at', 'recordings', ['approved_at'])

    op.create_table('favorite_recordings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('recording_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_favorite_recordings_id', 'favorite_recordings', ['id'])
    op.create_index('ix_favorite_recordings_user_id', 'favorite_recordings', ['user_id'])
    op.create_index('ix_favorite_recordings_recording_id', 'favorite_recordings', ['recording_id'])

    op.create_table('favorite_poems',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('poem_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_favorite_poems_id', 'favorite_poems', ['id'])
    op.create_index('ix_favorite_poems_user_id', 'favorite_poems', ['user_id'])
    op.create_index('ix_favorite_poems_poem_id', 'favorite_poems', ['poem_id'])

    op.create_table('favorite_poet',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_favorite_poet_id', 'favorite_poet', ['id'])
    op.create_index('ix_favorite_poet_user_id', 'favorite_poet', ['user_id'])

    op.create_table('users',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('profile_image_url', sa.String(), nullable=True),
        sa.Column('role', user_role, server_default='user', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'])


def downgrade() -> None:
    """Drop the archive schema"""
    op.drop_table('users')
    op.drop_table('favorite_poet')
    op.drop_table('favorite_poems')
    op.drop_table('favorite_recordings')
    op.drop_table('recordings')
    op.drop_table('submissions')
    op.drop_table('poems')
    user_role.drop(op.get_bind(), checkfirst=True)
    submission_status.drop(op.get_bind(), checkfirst=True)
