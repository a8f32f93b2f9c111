from scripts.seed_content import GAME_KEYS, parse_seed, to_columns


def test_camel_case_keys_mapped():
    row = {"id": 1, "imageUrl": "/jf-assets/raiza.png", "replayUrl": "https://replay/1", "players": "A vs B"}
    assert to_columns(row, GAME_KEYS) == {
        "image_url": "/jf-assets/raiza.png",
        "replay_url": "https://replay/1",
        "players": "A vs B",
    }


def test_parse_seed_skips_invalid_rows():
    seed = {
        "members": [
            {"id": "player1", "name": "Empo", "joinDate": "September 2015", "achievements": ["OST x1"]},
            {"id": "player2", "name": ""},
        ],
        "games": [
            {
                "id": 1,
                "tournament": "World Cup of Pokemon 2024",
                "players": "Raiza vs Luthier",
                "replayUrl": "https://replay.pokemonshowdown.com/smogtours-gen8ou-781566",
                "descriptionIt": "Raiza sconfigge Luthier",
                "descriptionEn": "Raiza defeats Luthier",
            },
        ],
    }

    members, games, errors = parse_seed(seed)

    assert [m.join_date for m in members] == ["September 2015"]
    assert games[0].description_en == "Raiza defeats Luthier"
    assert errors == ["members[1]: 1 invalid fields"]
