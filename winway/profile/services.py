# winway/profile/services.py
from winway.profile.schemas import Profile
from winway.storage.services import ProfileStore


def get_profile(profiles: ProfileStore) -> Profile:
    return profiles.load() or Profile()

def update_profile(profiles: ProfileStore, payload: Profile) -> tuple[Profile, bool]:
    profile = Profile(image_uri=payload.image_uri, user_name=payload.user_name or "")
    return profile, profiles.save(profile)
