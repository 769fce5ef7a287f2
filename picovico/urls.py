"""Endpoint paths, relative to the API base URL."""

LOGIN = "/login"
BEGIN_PROJECT = "/me/videos"
SINGLE_VIDEO = "/me/videos/{video_id}"
SAVE_VIDEO = "/me/videos/{video_id}"
CREATE_VIDEO = "/me/videos/{video_id}/render"
GET_STYLES = "/me/styles"
UPLOAD_IMAGE = "/me/images"
UPLOAD_MUSIC = "/me/musics"
