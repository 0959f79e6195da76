"""Bundled catalog used when the remote catalog is unavailable."""

from food_suggest.domain.foods import Food

SEED_FOODS: tuple[Food, ...] = (
    Food(
        id="pizza_veg",
        name="Sebzeli Pizza",
        name_en="Veggie Pizza",
        description="Bol sebzeli, sağlıklı İtalyan pizzası",
        emoji="🍕",
        category="Fast Food",
        cuisine="italian",
        moods=("happy", "energetic", "relaxed"),
        is_vegetarian=True,
    ),
    Food(
        id="pasta",
        name="Makarna",
        name_en="Pasta",
        description="Kremalı veya domatesli soslu nefis makarna",
        emoji="🍝",
        category="Ana Yemek",
        cuisine="italian",
        moods=("happy", "sad", "tired"),
        is_vegetarian=True,
    ),
    Food(
        id="sushi_veg",
        name="Sebze Sushi",
        name_en="Veggie Sushi",
        description="Avokado ve sebzeli vejetaryen sushi",
        emoji="🍣",
        category="Dünya Mutfağı",
        cuisine="japanese",
        moods=("happy", "relaxed"),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="burger",
        name="Hamburger",
        name_en="Burger",
        description="Ev yapımı köfteli, özel soslu burger",
        emoji="🍔",
        category="Fast Food",
        cuisine="american",
        moods=("happy", "energetic", "stressed"),
    ),
    Food(
        id="soup",
        name="Mercimek Çorbası",
        name_en="Lentil Soup",
        description="Geleneksel Türk mercimek çorbası",
        emoji="🍲",
        category="Geleneksel",
        cuisine="turkish",
        moods=("sad", "tired", "relaxed"),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="kebab_antep",
        name="Antep Kebabı",
        name_en="Antep Kebab",
        description="Gaziantep'in meşhur baharatlı kebabı",
        emoji="🍖",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "relaxed", "energetic"),
        regions=("guneydogu",),
        is_gluten_free=True,
    ),
    Food(
        id="kunefe",
        name="Künefe",
        name_en="Kunefe",
        description="Hatay'ın peynirli, şerbetli tatlısı",
        emoji="🍮",
        category="Bölgesel Tatlı",
        cuisine="turkish",
        moods=("happy", "sad", "relaxed"),
        regions=("akdeniz", "guneydogu"),
        is_vegetarian=True,
    ),
    Food(
        id="chocolate",
        name="Çikolata",
        name_en="Chocolate",
        description="Sütlü veya bitter, mutluluk veren çikolata",
        emoji="🍫",
        category="Tatlı",
        cuisine="snack",
        moods=("sad", "stressed", "happy"),
        is_vegetarian=True,
        is_gluten_free=True,
    ),
    Food(
        id="icecream",
        name="Dondurma",
        name_en="Ice Cream",
        description="Çeşit çeşit lezzetlerde taze dondurma",
        emoji="🍦",
        category="Tatlı",
        cuisine="world",
        moods=("sad", "happy", "relaxed"),
        is_vegetarian=True,
        is_gluten_free=True,
    ),
    Food(
        id="salad",
        name="Yeşil Salata",
        name_en="Green Salad",
        description="Taze sebzelerle hazırlanmış sağlıklı salata",
        emoji="🥗",
        category="Sağlıklı",
        cuisine="world",
        moods=("energetic", "relaxed"),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="smoothie",
        name="Smoothie",
        name_en="Smoothie",
        description="Meyveli, vitaminli enerji içeceği",
        emoji="🥤",
        category="İçecek",
        cuisine="world",
        moods=("energetic", "happy"),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="coffee",
        name="Kahve",
        name_en="Coffee",
        description="Enerji veren sıcak veya soğuk kahve",
        emoji="☕",
        category="İçecek",
        cuisine="world",
        moods=("tired", "stressed"),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="tea",
        name="Bitki Çayı",
        name_en="Herbal Tea",
        description="Papatya veya nane çayı ile rahatlayın",
        emoji="🍵",
        category="İçecek",
        cuisine="world",
        moods=("stressed", "relaxed", "tired"),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="nuts",
        name="Kuruyemiş",
        name_en="Mixed Nuts",
        description="Ceviz, badem, fındık karışımı",
        emoji="🥜",
        category="Atıştırmalık",
        cuisine="turkish",
        moods=("stressed", "tired", "energetic"),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="falafel",
        name="Falafel",
        name_en="Falafel",
        description="Nohutlu, baharatlı vegan köfte",
        emoji="🧆",
        category="Dünya Mutfağı",
        cuisine="middle_eastern",
        moods=("happy", "energetic"),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="hummus",
        name="Humus",
        name_en="Hummus",
        description="Tahin ve nohutlu sağlıklı meze",
        emoji="🥙",
        category="Meze",
        cuisine="middle_eastern",
        moods=("relaxed", "energetic"),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="taco",
        name="Taco",
        name_en="Taco",
        description="Meksika usulü acılı etli veya sebzeli taco",
        emoji="🌮",
        category="Dünya Mutfağı",
        cuisine="mexican",
        moods=("happy", "energetic"),
        is_gluten_free=True,
    ),
    Food(
        id="ramen",
        name="Ramen",
        name_en="Ramen",
        description="Zengin aromalı, noodle dolu Japon çorbası",
        emoji="🍜",
        category="Dünya Mutfağı",
        cuisine="japanese",
        moods=("happy", "tired", "sad"),
    ),
    Food(
        id="butter_chicken",
        name="Butter Chicken",
        name_en="Butter Chicken",
        description="Baharatlı ve kremalı Hint tavuk yemeği",
        emoji="🥘",
        category="Dünya Mutfağı",
        cuisine="indian",
        moods=("happy", "relaxed"),
        is_gluten_free=True,
    ),
    # Güneydoğu Anadolu
    Food(
        id="baklava_antep",
        name="Antep Baklavası",
        name_en="Antep Baklava",
        description="Fıstıklı, şerbetli gerçek Antep baklavası",
        emoji="🥮",
        category="Bölgesel Tatlı",
        cuisine="turkish",
        moods=("happy", "sad", "relaxed"),
        regions=("guneydogu",),
        is_vegetarian=True,
    ),
    Food(
        id="lahmacun_urfa",
        name="Urfa Lahmacunu",
        name_en="Urfa Lahmacun",
        description="İnce hamurlu, acılı Urfa lahmacunu",
        emoji="🫓",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "energetic", "tired"),
        regions=("guneydogu",),
    ),
    Food(
        id="cig_kofte",
        name="Çiğ Köfte",
        name_en="Cig Kofte",
        description="Acılı, baharatlı vejetaryen çiğ köfte",
        emoji="🥙",
        category="Bölgesel",
        cuisine="turkish",
        moods=("energetic", "happy"),
        regions=("guneydogu",),
        is_vegetarian=True,
        is_vegan=True,
    ),
    Food(
        id="katmer",
        name="Katmer",
        name_en="Katmer",
        description="Kaymak ve fıstıklı Gaziantep katmeri",
        emoji="🥞",
        category="Bölgesel Tatlı",
        cuisine="turkish",
        moods=("happy", "relaxed"),
        regions=("guneydogu",),
        is_vegetarian=True,
    ),
    # Karadeniz
    Food(
        id="kuymak",
        name="Kuymak (Muhlama)",
        name_en="Kuymak",
        description="Karadeniz'in meşhur peynirli mısır unu yemeği",
        emoji="🧀",
        category="Bölgesel",
        cuisine="turkish",
        moods=("sad", "tired", "relaxed"),
        regions=("karadeniz",),
        is_vegetarian=True,
        is_gluten_free=True,
    ),
    Food(
        id="hamsi",
        name="Hamsi Tava",
        name_en="Fried Anchovies",
        description="Karadeniz'in vazgeçilmez taze hamsisi",
        emoji="🐟",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "energetic"),
        regions=("karadeniz",),
        is_gluten_free=True,
    ),
    Food(
        id="pide_karadeniz",
        name="Karadeniz Pidesi",
        name_en="Black Sea Pide",
        description="Tereyağlı, yumurtalı Trabzon pidesi",
        emoji="🥖",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "tired", "relaxed"),
        regions=("karadeniz",),
        is_vegetarian=True,
    ),
    Food(
        id="laz_boregi",
        name="Laz Böreği",
        name_en="Laz Borek",
        description="Tatlı muhallebili Karadeniz böreği",
        emoji="🥧",
        category="Bölgesel Tatlı",
        cuisine="turkish",
        moods=("happy", "sad", "relaxed"),
        regions=("karadeniz",),
        is_vegetarian=True,
    ),
    # Ege
    Food(
        id="zeytinyagli",
        name="Zeytinyağlılar",
        name_en="Olive Oil Dishes",
        description="Ege'nin sağlıklı zeytinyağlı yemekleri",
        emoji="🫒",
        category="Bölgesel",
        cuisine="turkish",
        moods=("relaxed", "energetic", "happy"),
        regions=("ege",),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="boyoz",
        name="Boyoz",
        name_en="Boyoz",
        description="İzmir'in meşhur kahvaltı lezzeti",
        emoji="🥐",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "tired"),
        regions=("ege",),
        is_vegetarian=True,
    ),
    Food(
        id="kumru",
        name="Kumru",
        name_en="Kumru Sandwich",
        description="İzmir'in sucuklu ve kaşarlı özel sandviçi",
        emoji="🥪",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "energetic"),
        regions=("ege",),
    ),
    Food(
        id="lokma",
        name="İzmir Lokması",
        name_en="Izmir Lokma",
        description="Şerbetli, çıtır çıtır İzmir lokması",
        emoji="🍩",
        category="Bölgesel Tatlı",
        cuisine="turkish",
        moods=("happy", "sad"),
        regions=("ege",),
        is_vegetarian=True,
    ),
    # Akdeniz
    Food(
        id="adana_kebab",
        name="Adana Kebabı",
        name_en="Adana Kebab",
        description="Acılı, el yapımı gerçek Adana kebabı",
        emoji="🍢",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "energetic", "stressed"),
        regions=("akdeniz",),
        is_gluten_free=True,
    ),
    Food(
        id="salgam",
        name="Şalgam",
        name_en="Salgam",
        description="Adana'nın vazgeçilmez içeceği",
        emoji="🧃",
        category="Bölgesel İçecek",
        cuisine="turkish",
        moods=("energetic", "happy"),
        regions=("akdeniz",),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="tantuni",
        name="Tantuni",
        name_en="Tantuni",
        description="Mersin'in meşhur et dürümü",
        emoji="🌯",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "energetic", "tired"),
        regions=("akdeniz",),
    ),
    # İç Anadolu
    Food(
        id="manti_kayseri",
        name="Kayseri Mantısı",
        name_en="Kayseri Manti",
        description="Yoğurtlu, salçalı küçük mantılar",
        emoji="🥟",
        category="Bölgesel",
        cuisine="turkish",
        moods=("sad", "relaxed", "happy"),
        regions=("icanadolu",),
        is_vegetarian=True,
    ),
    Food(
        id="etli_ekmek",
        name="Konya Etli Ekmek",
        name_en="Konya Etli Ekmek",
        description="Uzun, ince Konya etli ekmeği",
        emoji="🥖",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "tired", "energetic"),
        regions=("icanadolu",),
    ),
    Food(
        id="pastirma",
        name="Pastırma",
        name_en="Pastirma",
        description="Kayseri'nin dünyaca ünlü pastırması",
        emoji="🥩",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "energetic"),
        regions=("icanadolu",),
        is_gluten_free=True,
    ),
    Food(
        id="ankara_tava",
        name="Ankara Tava",
        name_en="Ankara Tava",
        description="Ankara'nın geleneksel et yemeği",
        emoji="🍳",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "tired", "relaxed"),
        regions=("icanadolu",),
        is_gluten_free=True,
    ),
    # Marmara
    Food(
        id="iskender",
        name="İskender Kebap",
        name_en="Iskender Kebab",
        description="Bursa'nın meşhur tereyağlı iskenderi",
        emoji="🍖",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "relaxed", "tired"),
        regions=("marmara",),
    ),
    Food(
        id="inegol_kofte",
        name="İnegöl Köfte",
        name_en="Inegol Meatballs",
        description="Bursa İnegöl'ün özel köftesi",
        emoji="🍖",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "energetic"),
        regions=("marmara",),
        is_gluten_free=True,
    ),
    Food(
        id="kestane_sekeri",
        name="Kestane Şekeri",
        name_en="Candied Chestnuts",
        description="Bursa'nın tatlı kestane şekeri",
        emoji="🌰",
        category="Bölgesel Tatlı",
        cuisine="turkish",
        moods=("happy", "sad", "relaxed"),
        regions=("marmara",),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
    Food(
        id="balik_ekmek",
        name="Balık Ekmek",
        name_en="Fish Sandwich",
        description="İstanbul Eminönü'nün simgesi",
        emoji="🐟",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "relaxed"),
        regions=("marmara",),
    ),
    Food(
        id="kokorec",
        name="Kokoreç",
        name_en="Kokorec",
        description="İstanbul sokak lezzeti",
        emoji="🌯",
        category="Sokak Lezzeti",
        cuisine="turkish",
        moods=("happy", "energetic", "tired"),
        regions=("marmara",),
        is_gluten_free=True,
    ),
    # Doğu Anadolu
    Food(
        id="cag_kebabi",
        name="Cağ Kebabı",
        name_en="Cag Kebab",
        description="Erzurum'un yatay döner kebabı",
        emoji="🍖",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "energetic"),
        regions=("doguanadolu",),
        is_gluten_free=True,
    ),
    Food(
        id="kars_gravyer",
        name="Kars Gravyeri ile Kahvaltı",
        name_en="Kars Gruyere Breakfast",
        description="Kars'ın ünlü gravyer peyniri",
        emoji="🧀",
        category="Bölgesel",
        cuisine="turkish",
        moods=("happy", "relaxed"),
        regions=("doguanadolu",),
        is_vegetarian=True,
        is_gluten_free=True,
    ),
    Food(
        id="kadayif_dolmasi",
        name="Kadayıf Dolması",
        name_en="Stuffed Kadayif",
        description="Malatya'nın cevizli tatlısı",
        emoji="🥮",
        category="Bölgesel Tatlı",
        cuisine="turkish",
        moods=("happy", "sad", "relaxed"),
        regions=("doguanadolu",),
        is_vegetarian=True,
    ),
    Food(
        id="kuru_kayisi",
        name="Malatya Kayısısı",
        name_en="Malatya Dried Apricots",
        description="Dünyaca ünlü Malatya kuru kayısısı",
        emoji="🍑",
        category="Bölgesel",
        cuisine="turkish",
        moods=("energetic", "happy", "tired"),
        regions=("doguanadolu",),
        is_vegetarian=True,
        is_vegan=True,
        is_gluten_free=True,
    ),
)
