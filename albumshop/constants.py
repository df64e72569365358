SEED_ALBUMS = (
    {
        "id": 1,
        "title": "You, Me and an App Id",
        "artist": "Daprize",
        "price": 10.99,
        "image_url": "https://aka.ms/albums-daprlogo",
    },
    {
        "id": 2,
        "title": "Seven Revision Army",
        "artist": "The Blue-Green Stripes",
        "price": 13.99,
        "image_url": "https://aka.ms/albums-containerappslogo",
    },
    {
        "id": 3,
        "title": "Scale It Up",
        "artist": "KEDA Club",
        "price": 13.99,
        "image_url": "https://aka.ms/albums-kedalogo",
    },
    {
        "id": 4,
        "title": "Lost in Translation",
        "artist": "MegaDNS",
        "price": 12.99,
        "image_url": "https://aka.ms/albums-envoylogo",
    },
    {
        "id": 5,
        "title": "Lock Down Your Love",
        "artist": "V is for VNET",
        "price": 12.99,
        "image_url": "https://aka.ms/albums-vnetlogo",
    },
    {
        "id": 6,
        "title": "Sweet Container O' Mine",
        "artist": "Guns N Probeses",
        "price": 14.99,
        "image_url": "https://aka.ms/albums-containerappslogo",
    },
)

ALBUM_FIELDS = ("title", "artist", "price", "image_url")

WELCOME_TEXT = "Hit the /albums endpoint to retrieve a list of albums!"
ALBUM_NOT_FOUND = "Album not found"

# max_plus_one reuses the top id after it is deleted; monotonic never reuses
ID_MAX_PLUS_ONE = "max_plus_one"
ID_MONOTONIC = "monotonic"
ID_POLICIES = (ID_MAX_PLUS_ONE, ID_MONOTONIC)

CART_STORAGE_KEY = "album-cart"

LOCALES = ("en", "fr", "de")
LOCALE_NAMES = {
    "en": "English",
    "fr": "Français",
    "de": "Deutsch",
}
