from .update_profile import UpdateProfileUseCase, to_inline_view_url

__all__ = ["UpdateProfileUseCase", "to_inline_view_url"]
