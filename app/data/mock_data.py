from __future__ import annotations

import random
from datetime import date, timedelta

from faker import Faker

from data.models import CATEGORIES, OwnerBooking, Review, UpcomingBooking, Venue


fake = Faker()


_VENUES = [
    {
        "id": 1,
        "name": "Sheraton Addis, a Luxury Collection Hotel",
        "description": "More than just a hotel, the Sheraton Addis is an iconic landmark and the city's premier luxury venue for high-society weddings, corporate galas, and international meetings.",
        "price": 15000.00,
        "capacity": 500,
        "image": "assets/images/Addis-Sheraton-Pool-Area.jpg",
        "rating": 4.2,
        "review_count": 24,
        "amenities": ["WiFi", "Parking", "Projector", "Catering Kitchen", "Dance Floor", "Stage", "Sound System"],
        "tags": ["Weddings", "Corporate", "Luxury", "Banquet"],
        "address": "Taitu St, Addis Ababa, Ethiopia.",
        "category": "luxury",
        "detailed_description": "More than just a hotel, the Sheraton Addis is an iconic landmark and the city's premier luxury venue for high-society weddings, corporate galas, and international meetings. It offers multiple, beautifully appointed ballrooms (like the Menelik and Ras Ballrooms), extensive gardens, and world-class service. Its opulent setting is synonymous with elite events.",
    },
    {
        "id": 2,
        "name": "Skylight International Hotel",
        "description": "A modern and expansive venue owned by Ethiopian Airlines. It features the massive \"Cloud Nine\" ballroom, one of the largest pillar-free halls in East Africa, ideal for mega-weddings, product launches, and large conferences.",
        "price": 10500.00,
        "capacity": 300,
        "image": "assets/images/refresh-yourself-at-aquarius.jpg",
        "rating": 4.7,
        "review_count": 47,
        "amenities": ["Outdoor Space", "Garden", "Parking", "Catering Kitchen", "Restrooms", "Lighting"],
        "tags": ["Outdoor", "Weddings", "Garden", "Nature"],
        "address": "Bole,Next to Millennium Hall, Ethiopia",
        "category": "outdoor",
        "detailed_description": "A modern and expansive venue owned by Ethiopian Airlines. It features the massive \"Cloud Nine\" ballroom, one of the largest pillar-free halls in East Africa, ideal for mega-weddings, product launches, and large conferences. The hotel also offers versatile meeting rooms, outdoor spaces, and superior catering services.",
    },
    {
        "id": 3,
        "name": "Radisson Blu Hotel",
        "description": "A leading international business hotel known for its excellent conference and meeting facilities. It features the \"Africa Ballroom\" and multiple flexible function rooms equipped with cutting-edge technology.",
        "price": 12000.00,
        "capacity": 200,
        "image": "assets/images/9376b90c119d6824c692c66ef05a5d8b.jpeg",
        "rating": 4.0,
        "review_count": 18,
        "amenities": ["WiFi", "Projector", "Air Conditioning", "Whiteboards", "Video Conferencing", "Breakout Rooms"],
        "tags": ["Corporate", "Meetings", "Tech", "Conference"],
        "address": "Kazanchis Business District, Addis Ababa, Ethiopia",
        "category": "corporate",
        "detailed_description": "A leading international business hotel known for its excellent conference and meeting facilities. It features the \"Africa Ballroom\" and multiple flexible function rooms equipped with cutting-edge technology. It is a top-tier choice for corporate conferences, seminars, business lunches, and medium-to-large-scale professional events due to its central location and reliable standards.",
    },
    {
        "id": 4,
        "name": "Kuriftu Resort & Spa",
        "description": "Kuriftu Entoto is not just a venue; it's an experience. Perched on the slopes of Entoto Mountain, it offers breathtaking, panoramic views over the entire city of Addis Ababa.",
        "price": 18000.00,
        "capacity": 400,
        "image": "assets/images/684711f9071f8-unnamed.webp",
        "rating": 4.5,
        "review_count": 32,
        "amenities": ["Air Conditioning", "WiFi", "Valet Parking", "Full Kitchen", "Bar Service", "Stage"],
        "tags": ["Luxury", "Banquet", "Fine Dining", "Formal"],
        "address": "Entoto Mountain, Addis Ababa, Ethiopia.",
        "category": "luxury",
        "detailed_description": "Kuriftu Entoto is not just a venue; it's an experience. Perched on the slopes of Entoto Mountain, it offers breathtaking, panoramic views over the entire city of Addis Ababa. It is renowned for its rustic-chic Ethiopian architecture, using natural stone, wood, and traditional design elements to create a sense of serene luxury.",
    },
    {
        "id": 5,
        "name": "Ghion Hotel",
        "description": "Modern co-working space with high-speed internet, meeting rooms, and presentation equipment.",
        "price": 8500.00,
        "capacity": 150,
        "image": "assets/images/IMG-20241113-WA0002.jpg",
        "rating": 4.8,
        "review_count": 56,
        "amenities": ["Outdoor Space", "Garden", "Parking", "Meeting Rooms", "Whiteboards", "Projectors"],
        "tags": ["Historic", "Garden", "Weddings", "Events"],
        "address": "Ras Abebe Aregay St, Addis Ababa, Ethiopia",
        "category": "tech",
        "detailed_description": "A historic hotel set within vast, serene gardens in the heart of the city. Ghion is a favorite for large outdoor events, garden weddings, cultural festivals, and relaxed yet sizable gatherings. Its ample green space, combined with its classic ballrooms, provides a versatile and picturesque setting away from the urban bustle.",
    },
    {
        "id": 6,
        "name": "Millennium Hall",
        "description": "This is Ethiopia's largest and most prestigious convention center, often called the \"UN Conference Center of Africa.\"",
        "price": 7800.00,
        "capacity": 100,
        "image": "assets/images/6847c9a1616fb-unnamed (2).webp",
        "rating": 4.3,
        "review_count": 21,
        "amenities": ["Open Space", "concerts", "Kitchenette", "WiFi", "Sound System"],
        "tags": ["exhibitions", "concerts", "Creative", "Industrial"],
        "address": "303 Creative Street, Addis Ababa",
        "category": "art",
        "detailed_description": "This is Ethiopia's largest and most prestigious convention center, often called the \"UN Conference Center of Africa.\" It's a state-of-the-art facility built for major international conferences, large-scale exhibitions, trade fairs, and high-profile concerts. Its grandeur and capacity make it the top choice for diplomatic and pan-African events.",
    },
]


def venues_mock() -> list[Venue]:
    # Fresh records (and fresh lists) on every call
    return [
        Venue(**{**v, "amenities": list(v["amenities"]), "tags": list(v["tags"])})
        for v in _VENUES
    ]


def categories_mock() -> list[str]:
    return list(CATEGORIES)


def reviews_mock() -> list[Review]:
    return [
        Review(
            id=1,
            user="Kaleb Tesfaye",
            rating=5,
            comment="Absolutely stunning venue! Our wedding was magical here. The staff was professional and attentive, making sure everything went smoothly.",
            date=date(2024, 1, 15),
        ),
        Review(
            id=2,
            user="Athrons Gebremedhin",
            rating=4,
            comment="Perfect for our corporate awards ceremony. The AV equipment was top-notch and the space accommodated all 400 guests comfortably.",
            date=date(2023, 12, 5),
        ),
        Review(
            id=3,
            user="yionas Mekonnen",
            rating=3,
            comment="Beautiful venue but parking was a bit challenging during peak hours. Otherwise, great experience for our graduation party.",
            date=date(2023, 11, 20),
        ),
    ]


def owner_bookings_mock() -> list[OwnerBooking]:
    return [
        OwnerBooking(id=1, status="pending", customer="John Smith", date=date(2024, 3, 15)),
        OwnerBooking(id=2, status="confirmed", customer="Emma Wilson", date=date(2024, 4, 20)),
    ]


def upcoming_bookings_mock(venues: list[Venue], n_rows: int = 5) -> list[UpcomingBooking]:
    if not venues:
        return []
    Faker.seed(17)
    random.seed(17)
    today = date.today()
    rows = []
    for _ in range(n_rows):
        v = random.choice(venues)
        rows.append(
            UpcomingBooking(
                booking_id=f"BK{fake.unique.random_number(digits=10, fix_len=True)}",
                venue_name=v.name,
                date=today + timedelta(days=random.randint(3, 90)),
                guests=max(10, min(v.capacity, int(random.gauss(v.capacity * 0.6, v.capacity * 0.2)))),
                status=random.choice(["confirmed", "confirmed", "pending"]),
            )
        )
    fake.unique.clear()
    return sorted(rows, key=lambda r: r.date)
