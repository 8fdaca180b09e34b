"""
Sample Box View API payloads shared by the tests.
"""

API_KEY = "abc123"
BASE_URL = "https://view-api.box.com/1"
UPLOAD_URL = "https://upload.view-api.box.com/1"

SAMPLE_DOCUMENT = {
    "type": "document",
    "id": "2da6cf9261824fb0a4fe532f94d14625",
    "status": "done",
    "name": "Leaves of Grass",
    "created_at": "2013-08-30T00:17:37Z",
}

SAMPLE_SESSION = {
    "type": "session",
    "id": "d1b8c35a69da43fbb2fd4bea5d0f4d2e",
    "document": {
        "type": "document",
        "id": "8e4e4cd8b7a54a5a9d5de2ff0b5fa7c1",
        "status": "done",
        "name": "Form W4",
        "created_at": "2013-08-30T00:17:37Z",
    },
    "expires_at": "2013-08-30T00:27:37.000Z",
    "urls": {
        "view": "https://view-api.box.com/1/sessions/d1b8c35a/view",
        "assets": "https://view-api.box.com/1/sessions/d1b8c35a/assets/",
        "realtime": "https://view-api.box.com/sse/d1b8c35a",
    },
}
