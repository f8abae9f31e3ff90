# winway/profile/routes.py
from fastapi import APIRouter, Depends, Response

from winway.profile import services as profile_service
from winway.profile.schemas import Profile
from winway.storage.services import ProfileStore, RecordStore, get_store

router = APIRouter(prefix="/profile", tags=["Profile"])


def get_profiles(store: RecordStore = Depends(get_store)) -> ProfileStore:
    return ProfileStore(store)


@router.get("/", response_model=Profile)
def get(profiles: ProfileStore = Depends(get_profiles)):
    return profile_service.get_profile(profiles)


@router.put("/", response_model=Profile)
def update(payload: Profile, response: Response, profiles: ProfileStore = Depends(get_profiles)):
    profile, persisted = profile_service.update_profile(profiles, payload)
    # save failures are reported here, never raised
    response.headers["X-Persisted"] = "true" if persisted else "false"
    return profile
