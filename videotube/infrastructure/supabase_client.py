from supabase import create_client, Client

from videotube.config import Settings


def create_supabase_client(settings: Settings) -> Client:
    if not settings.supabase_url or not settings.supabase_key:
        raise ValueError(
            "Supabase credentials not found in environment. "
            "Checked SUPABASE_URL and NEXT_PUBLIC_SUPABASE_URL."
        )
    return create_client(settings.supabase_url, settings.supabase_key)
