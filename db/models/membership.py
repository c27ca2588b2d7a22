from datetime import datetime

from peewee import AutoField, CharField, DateTimeField, ForeignKeyField

from db.base import BaseModel
from db.models.league import League

ACTIVE = "active"


class LeagueMembership(BaseModel):
    id = AutoField(primary_key=True)
    user_id = CharField(max_length=255, index=True)  # identity from the auth provider
    league = ForeignKeyField(
        League,
        backref="memberships",
        on_delete="CASCADE",
        column_name="league_id",
    )
    role = CharField(max_length=20, default="member")  # admin, coach, scorekeeper, member, viewer
    status = CharField(max_length=20, default=ACTIVE)  # pending, active, suspended, removed
    joined_at = DateTimeField(default=datetime.utcnow, null=True)

    class Meta:
        table_name = "league_memberships"
        indexes = (
            (("user_id", "league"), True),
        )

    def __repr__(self):
        return f"<LeagueMembership(user_id='{self.user_id}', league_id={self.league_id}, status='{self.status}')>"
