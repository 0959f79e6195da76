"""Static city to region lookup tables."""

REGION_MAP: dict[str, str] = {
    # Marmara
    "İstanbul": "marmara",
    "Bursa": "marmara",
    "Kocaeli": "marmara",
    "Sakarya": "marmara",
    "Edirne": "marmara",
    "Tekirdağ": "marmara",
    "Çanakkale": "marmara",
    "Balıkesir": "marmara",
    # Ege
    "İzmir": "ege",
    "Aydın": "ege",
    "Muğla": "ege",
    "Denizli": "ege",
    "Manisa": "ege",
    "Afyon": "ege",
    "Afyonkarahisar": "ege",
    # Akdeniz
    "Antalya": "akdeniz",
    "Adana": "akdeniz",
    "Mersin": "akdeniz",
    "Hatay": "akdeniz",
    "Kahramanmaraş": "akdeniz",
    # İç Anadolu
    "Ankara": "icanadolu",
    "Konya": "icanadolu",
    "Eskişehir": "icanadolu",
    "Kayseri": "icanadolu",
    "Sivas": "icanadolu",
    "Nevşehir": "icanadolu",
    # Karadeniz
    "Trabzon": "karadeniz",
    "Samsun": "karadeniz",
    "Rize": "karadeniz",
    "Ordu": "karadeniz",
    "Giresun": "karadeniz",
    "Artvin": "karadeniz",
    # Doğu Anadolu
    "Erzurum": "doguanadolu",
    "Van": "doguanadolu",
    "Malatya": "doguanadolu",
    "Elazığ": "doguanadolu",
    "Kars": "doguanadolu",
    # Güneydoğu Anadolu
    "Gaziantep": "guneydogu",
    "Diyarbakır": "guneydogu",
    "Şanlıurfa": "guneydogu",
    "Mardin": "guneydogu",
}

REGION_NAMES: dict[str, str] = {
    "marmara": "Marmara",
    "ege": "Ege",
    "akdeniz": "Akdeniz",
    "icanadolu": "İç Anadolu",
    "karadeniz": "Karadeniz",
    "doguanadolu": "Doğu Anadolu",
    "guneydogu": "Güneydoğu Anadolu",
}


def region_name(region_code: str) -> str:
    """Return the display name for a region code."""
    return REGION_NAMES.get(region_code, region_code)
