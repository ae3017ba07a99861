from socialhub.schemas.common import CamelModel


class LikeToggleResponse(CamelModel):
    is_liked: bool
    like_count: int
