"""Built-in demonstration dataset used when the corpus source is unavailable."""

from __future__ import annotations

from typing import Any

_IMG = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=800&q=80"

DEFAULT_DESIGNS: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Braun T3 Pocket Radio",
        "designer": "Dieter Rams",
        "author": "Dieter Rams",
        "year": "1958",
        "category": "Industrial",
        "region": "Europe",
        "image": _IMG.format("1581094794329-c8112a89af12"),
        "description": (
            "The T3 radio is a model of minimalist design. Rams' 'less but better' "
            "principle later shaped the iPod; its dial and grille still look current."
        ),
        "materials": ["Plastic", "Metal"],
        "style": ["Minimalism", "Functionalism"],
        "impact": "Defined the design language of modern consumer electronics",
    },
    {
        "id": 2,
        "title": "Smartisan T1",
        "designer": "Smartisan",
        "author": "Smartisan",
        "year": "2014",
        "category": "Product",
        "region": "Asia",
        "image": _IMG.format("1511707171634-5f897ff02aa9"),
        "description": (
            "A study in symmetry: the curved edges of the back panel catch light "
            "like polished jade, built with meticulous craft."
        ),
        "materials": ["3D glass", "Stainless steel frame"],
        "style": ["Symmetry", "Skeuomorphism", "Modernism"],
        "impact": "Redefined aesthetic standards for smartphones",
    },
    {
        "id": 3,
        "title": "Helvetica Typeface",
        "designer": "Max Miedinger",
        "author": "Max Miedinger",
        "year": "1957",
        "category": "Graphic",
        "region": "Europe",
        "image": _IMG.format("1611224923853-80b023f02d71"),
        "description": (
            "The emblem of Swiss-style graphic design. Neutral, clear and objective, "
            "it is used everywhere from corporate logos to the New York subway."
        ),
        "materials": ["Type design"],
        "style": ["Swiss Style", "Modernism"],
        "impact": "Became the most widely used sans-serif typeface",
    },
    {
        "id": 4,
        "title": "Leica M3",
        "designer": "Leitz",
        "author": "Leitz",
        "year": "1954",
        "category": "Industrial",
        "region": "Europe",
        "image": _IMG.format("1516035069371-29a1b244cc32"),
        "description": (
            "Considered one of the greatest cameras ever made. It set the standard "
            "for rangefinders with astonishing mechanical precision."
        ),
        "materials": ["Metal", "Leather"],
        "style": ["Functionalism", "Precision engineering"],
        "impact": "Established the design standard for professional cameras",
    },
    {
        "id": 5,
        "title": "Sony Walkman TPS-L2",
        "designer": "Norio Ohga",
        "author": "Sony",
        "year": "1979",
        "category": "Consumer",
        "region": "Asia",
        "image": _IMG.format("1598301257983-0cbe50a2e48c"),
        "description": (
            "Made music personal and portable. The blue and silver body was both "
            "futuristic and retro, opening the era of mobile listening."
        ),
        "materials": ["Plastic", "Metal"],
        "style": ["Futurism", "Portable design"],
        "impact": "Created the personal portable music player market",
    },
    {
        "id": 6,
        "title": "Macintosh 128K",
        "designer": "Jerry Manock",
        "author": "Apple",
        "year": "1984",
        "category": "Digital",
        "region": "North America",
        "image": _IMG.format("1587831990711-23ca6441447b"),
        "description": (
            "The first Macintosh. Its smiling start-up screen and beige all-in-one "
            "case turned the computer into a friendly household appliance."
        ),
        "materials": ["Plastic", "Metal"],
        "style": ["Friendly design", "All-in-one"],
        "impact": "Popularized the graphical user interface and personal computing",
    },
    {
        "id": 7,
        "title": "iPhone",
        "designer": "Apple",
        "author": "Apple",
        "year": "2007",
        "category": "Consumer",
        "region": "North America",
        "image": _IMG.format("1511707171634-5f897ff02aa9"),
        "description": (
            "The first iPhone combined a music player, a phone and an internet "
            "communicator in one handheld device."
        ),
        "materials": ["Glass", "Metal"],
        "style": ["Modernism", "Minimalism"],
        "impact": "Transformed the smartphone industry and mobile computing",
    },
    {
        "id": 8,
        "title": "Apple Watch Series",
        "designer": "Apple",
        "author": "Apple",
        "year": "2015",
        "category": "Consumer",
        "region": "North America",
        "image": _IMG.format("1434493650001-5d43a6fea0a6"),
        "description": (
            "Redefined wearables by folding health tracking, messaging and a "
            "personal assistant into an elegant watch."
        ),
        "materials": ["Ceramic", "Metal", "Sapphire"],
        "style": ["Wearable design", "Health tech"],
        "impact": "Advanced wearable devices and health monitoring",
    },
    {
        "id": 9,
        "title": "PlayStation 5",
        "designer": "Sony",
        "author": "Sony",
        "year": "2020",
        "category": "Consumer",
        "region": "Asia",
        "image": _IMG.format("1606144042614-b2417e99c4e3"),
        "description": (
            "A bold, futuristic shell with a clean architectural form language "
            "that reflects generations of console evolution."
        ),
        "materials": ["Plastic", "Metal"],
        "style": ["Futurism", "Game design"],
        "impact": "Showed the future direction of console design",
    },
    {
        "id": 10,
        "title": "Eames Lounge Chair",
        "designer": "Charles and Ray Eames",
        "author": "Herman Miller",
        "year": "1956",
        "category": "Furniture",
        "region": "North America",
        "image": _IMG.format("1586023492125-27b2c045efd7"),
        "description": (
            "An icon of modern furniture pairing luxurious comfort with a lean "
            "modern aesthetic in molded plywood and leather."
        ),
        "materials": ["Plywood", "Leather", "Aluminium"],
        "style": ["Modernism", "Organic design"],
        "impact": "One of the most representative furniture designs of the 20th century",
    },
    {
        "id": 11,
        "title": "Coca-Cola Contour Bottle",
        "designer": "Earl R. Dean",
        "author": "Coca-Cola",
        "year": "1915",
        "category": "Product",
        "region": "North America",
        "image": _IMG.format("1622483767028-3f66f32aef97"),
        "description": (
            "A packaging classic whose curves are recognizable even in the dark."
        ),
        "materials": ["Glass", "Plastic"],
        "style": ["Classic", "Brand design"],
        "impact": "Created one of the most recognizable packages ever",
    },
    {
        "id": 12,
        "title": "Barcelona Chair",
        "designer": "Ludwig Mies van der Rohe",
        "author": "Knoll",
        "year": "1929",
        "category": "Furniture",
        "region": "Europe",
        "image": _IMG.format("1598300042247-d088f8ab3a91"),
        "description": (
            "Designed for the German Pavilion at the 1929 Barcelona International "
            "Exposition, it embodies 'less is more'."
        ),
        "materials": ["Stainless steel", "Leather"],
        "style": ["Modernism", "International Style"],
        "impact": "Defined the standard for modern luxury furniture",
    },
    {
        "id": 13,
        "title": "Google Home",
        "designer": "Google",
        "author": "Google",
        "year": "2016",
        "category": "Digital",
        "region": "North America",
        "image": _IMG.format("1543512214-318c7553f230"),
        "description": (
            "Brought an AI assistant into the home. The fabric shell blends into "
            "many interiors while offering voice interaction."
        ),
        "materials": ["Plastic", "Fabric"],
        "style": ["Friendly design", "Modernism"],
        "impact": "Popularized smart homes and voice assistants",
    },
    {
        "id": 14,
        "title": "Nike Air Max",
        "designer": "Tinker Hatfield",
        "author": "Nike",
        "year": "1987",
        "category": "Product",
        "region": "North America",
        "image": _IMG.format("1542291026-7eec264c27ff"),
        "description": (
            "Visible air cushioning changed footwear design and made the sneaker a "
            "street culture icon."
        ),
        "materials": ["Leather", "Mesh", "Air cushion"],
        "style": ["Sport design", "Street culture"],
        "impact": "Turned sneakers from functional products into cultural symbols",
    },
    {
        "id": 15,
        "title": "iMac G3",
        "designer": "Jonathan Ive",
        "author": "Apple",
        "year": "1998",
        "category": "Digital",
        "region": "North America",
        "image": _IMG.format("1517336714731-489689fd1ca8"),
        "description": (
            "A translucent Bondi Blue shell integrating display and computer, "
            "offered in a range of vivid colors."
        ),
        "materials": ["Plastic", "CRT display"],
        "style": ["Color design", "All-in-one"],
        "impact": "Saved Apple and redefined personal computer design",
    },
    {
        "id": 16,
        "title": "Volkswagen Beetle",
        "designer": "Ferdinand Porsche",
        "author": "Volkswagen",
        "year": "1938",
        "category": "Industrial",
        "region": "Europe",
        "image": _IMG.format("1503376780353-7e6692767b70"),
        "description": (
            "Rounded shape, rear engine and durability made it one of the best "
            "selling cars in the world."
        ),
        "materials": ["Steel", "Glass"],
        "style": ["Streamline", "Classic"],
        "impact": "One of the most recognizable shapes in automotive history",
    },
    {
        "id": 17,
        "title": "MUJI CD Player",
        "designer": "Naoto Fukasawa",
        "author": "MUJI",
        "year": "1999",
        "category": "Product",
        "region": "Asia",
        "image": _IMG.format("1505740420928-5e560c06d30e"),
        "description": (
            "A wall-mounted player controlled by a pull cord, hiding complex "
            "technology behind a simple form."
        ),
        "materials": ["Plastic", "Metal"],
        "style": ["Minimalism", "Without thought"],
        "impact": "Showed the essence of Japanese minimalist design",
    },
    {
        "id": 18,
        "title": "London Underground Map",
        "designer": "Harry Beck",
        "author": "Harry Beck",
        "year": "1933",
        "category": "Graphic",
        "region": "Europe",
        "image": _IMG.format("1590691565924-90d0a14443b3"),
        "description": (
            "A milestone of information design that traded geographic accuracy "
            "for a circuit-diagram abstraction."
        ),
        "materials": ["Print design"],
        "style": ["Information design", "Modernism"],
        "impact": "Became the global standard for transit maps",
    },
    {
        "id": 19,
        "title": "Airbnb Logo",
        "designer": "DesignStudio",
        "author": "Airbnb",
        "year": "2014",
        "category": "Graphic",
        "region": "Global",
        "image": _IMG.format("1542744095-fcf48d80b0fd"),
        "description": (
            "The Belo symbol combines people, place and love into a mark meant to "
            "be recognized worldwide."
        ),
        "materials": ["Brand design"],
        "style": ["Symbol design", "Modernism"],
        "impact": "Illustrated how brand identity evolved in the digital era",
    },
    {
        "id": 20,
        "title": "Tesla Model S",
        "designer": "Franz von Holzhausen",
        "author": "Tesla",
        "year": "2012",
        "category": "Industrial",
        "region": "North America",
        "image": _IMG.format("1560958089-b8a1929cea89"),
        "description": (
            "Aerodynamic body, minimal interior and a large touch screen combine "
            "performance with sustainability."
        ),
        "materials": ["Aluminium", "Glass", "Leather"],
        "style": ["Futurism", "Aerodynamics"],
        "impact": "Drove adoption and design innovation of electric cars",
    },
]
