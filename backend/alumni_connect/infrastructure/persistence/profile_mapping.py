"""Shared profile lookup for the Prisma repositories."""

from prisma import Prisma
from prisma.models import Profile as PrismaProfile

from alumni_connect.domain.entities.profile import Profile, UserType
from alumni_connect.domain.value_objects.user_id import UserId


def to_profile(record: PrismaProfile) -> Profile:
    """Map Prisma record to domain entity."""
    user_type = UserType(record.user_type) if record.user_type in {"student", "alumni"} else None
    return Profile(
        id=UserId(record.id),
        full_name=record.full_name,
        degree=record.degree,
        user_type=user_type,
        location=record.location,
        graduation_year=record.graduation_year,
        current_year=record.current_year,
        linkedin_url=record.linkedin_url,
    )


async def fetch_profiles(prisma: Prisma, user_ids: set[str]) -> dict[str, Profile]:
    """Bulk-fetch profiles keyed by user id. Unknown ids are simply absent."""
    if not user_ids:
        return {}
    records = await prisma.profile.find_many(where={"id": {"in": sorted(user_ids)}})
    return {record.id: to_profile(record) for record in records}
