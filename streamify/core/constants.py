# ============================================================================
# FILE: streamify/core/constants.py
# ============================================================================
from typing import List

MUSIC_GENRES = [
    "Pop",
    "Rap",
    "Hip-Hop",
    "Rock",
    "Electronic",
    "R&B",
    "Country",
    "Jazz",
    "Classical",
    "Reggae",
]

# Name suggestions offered by the admin song/album forms
POPULAR_ARTISTS = {
    "international": [
        "The Weeknd", "Billie Eilish", "Drake", "Taylor Swift", "Ed Sheeran",
        "Ariana Grande", "Post Malone", "Dua Lipa", "Justin Bieber", "Bad Bunny",
        "Travis Scott", "Eminem", "Kanye West", "Kendrick Lamar", "Bruno Mars",
        "Adele", "Rihanna", "Beyoncé", "Coldplay", "Imagine Dragons",
        "Maroon 5", "OneRepublic", "The Chainsmokers", "Calvin Harris", "David Guetta",
        "Martin Garrix", "Avicii", "Skrillex", "Deadmau5", "Daft Punk",
        "Swedish House Mafia", "Armin van Buuren", "Tiësto", "Hardwell", "Marshmello",
        "Alan Walker", "Kygo", "Zedd", "The Prodigy", "Linkin Park",
        "Green Day", "Red Hot Chili Peppers", "Foo Fighters", "Nirvana", "Metallica",
        "AC/DC", "Queen", "The Beatles", "Pink Floyd", "Led Zeppelin",
        "The Rolling Stones", "U2", "Radiohead", "Arctic Monkeys", "The Killers",
        "Muse", "Arcade Fire", "The Strokes", "Interpol", "Tame Impala",
        "Glass Animals", "Twenty One Pilots", "Panic! At The Disco", "Fall Out Boy",
        "My Chemical Romance", "Paramore", "Blink-182", "Sum 41", "System of a Down",
        "Rage Against the Machine", "Tool", "Deftones", "Slipknot", "Slayer",
        "Megadeth", "Iron Maiden", "Black Sabbath", "Judas Priest", "Motorhead",
        "Deep Purple", "Rainbow", "Dio", "Ozzy Osbourne",
    ],
    "iranian": [
        "Ebi", "Googoosh", "Hayedeh", "Moein", "Shadmehr Aghili",
        "Mohsen Yeganeh", "Reza Sadeghi", "Mohsen Chavoshi", "Farshid Amin", "Siavash Ghomayshi",
        "Andy Madadian", "Shahram Shabpareh", "Kourosh Yaghmaei", "Farhad Mehrad",
        "Fereydoun Farrokhzad", "Sattar", "Dariush", "Hassan Shamaizadeh", "Iraj", "Hedayat",
        "Mohammad Reza Shajarian", "Shahram Nazeri", "Hossein Alizadeh", "Kayhan Kalhor",
        "Ali Akbar Moradi", "Mohammad Reza Lotfi", "Parviz Meshkatian", "Jalal Zolfonun",
        "Hossein Omoumi", "Dariush Talai", "Hamid Motebassem", "Majid Derakhshani",
        "Behnam Bani", "Mohsen Namjoo", "Hamed Nikpay", "Mohammad Esfahani",
        "Reza Bahram", "Saeed Mohammadi", "Hamed Behdad", "Amir Tataloo", "Reza Pishro",
        "Sogand", "Mohsen Ebrahimzadeh", "Hamed Homayoun", "Sirvan Khosravi", "Mehdi Yarrahi",
    ],
}

def get_all_genres() -> List[str]:
    return list(MUSIC_GENRES)

def get_all_artists() -> List[str]:
    return sorted(set(POPULAR_ARTISTS["international"]) | set(POPULAR_ARTISTS["iranian"]))
