from __future__ import annotations

import pytest

DAD = {
    "name": "Dad",
    "ageGroup": "Adult",
    "gender": "Male",
    "avatar": "👨",
    "preferences": {"shirtSize": "L", "shoeSize": "10", "personalCare": "Old Spice"},
}

KID = {
    "name": "Mia",
    "ageGroup": "Child",
    "gender": "Female",
    "avatar": "👧",
    "preferences": {"shirtSize": "4T"},
}


def test_create_and_get_profile(client, auth_headers):
    response = client.post("/api/profiles", json=DAD, headers=auth_headers)
    assert response.status_code == 201
    created = response.json()
    assert created["id"]
    assert created["ownerId"]
    assert created["ageGroup"] == "Adult"
    assert created["preferences"] == {"shirtSize": "L", "shoeSize": "10", "personalCare": "Old Spice"}

    response = client.get(f"/api/profiles/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == created


def test_list_profiles_in_creation_order(client, auth_headers):
    first = client.post("/api/profiles", json=DAD, headers=auth_headers).json()
    second = client.post("/api/profiles", json=KID, headers=auth_headers).json()

    response = client.get("/api/profiles", headers=auth_headers)
    assert response.status_code == 200
    assert [profile["id"] for profile in response.json()] == [first["id"], second["id"]]


def test_optional_preferences_are_omitted(client, auth_headers):
    payload = {"name": "Grandma", "ageGroup": "Senior", "gender": "Female", "preferences": {"shoeSize": " "}}
    created = client.post("/api/profiles", json=payload, headers=auth_headers).json()
    assert created["preferences"] == {"shirtSize": None, "shoeSize": None, "personalCare": None}
    assert created["avatar"] is None


def test_update_profile(client, auth_headers):
    created = client.post("/api/profiles", json=DAD, headers=auth_headers).json()
    update = dict(DAD, name="Papa", preferences={"shirtSize": "XL"})

    response = client.put(f"/api/profiles/{created['id']}", json=update, headers=auth_headers)
    assert response.status_code == 200
    updated = response.json()
    assert updated["id"] == created["id"]
    assert updated["name"] == "Papa"
    assert updated["preferences"]["shirtSize"] == "XL"
    assert updated["preferences"]["personalCare"] is None


def test_delete_profile(client, auth_headers):
    created = client.post("/api/profiles", json=KID, headers=auth_headers).json()

    response = client.delete(f"/api/profiles/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "deleted": created}

    assert client.get(f"/api/profiles/{created['id']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/profiles/{created['id']}", headers=auth_headers).status_code == 404


def test_profiles_are_isolated_per_owner(client, make_user):
    owner = make_user("owner")
    stranger = make_user("stranger")
    created = client.post("/api/profiles", json=DAD, headers=owner).json()

    assert client.get("/api/profiles", headers=stranger).json() == []
    assert client.get(f"/api/profiles/{created['id']}", headers=stranger).status_code == 404
    assert client.put(f"/api/profiles/{created['id']}", json=KID, headers=stranger).status_code == 404
    assert client.delete(f"/api/profiles/{created['id']}", headers=stranger).status_code == 404

    # Profile của owner không bị ảnh hưởng
    assert client.get(f"/api/profiles/{created['id']}", headers=owner).json()["name"] == "Dad"


@pytest.mark.parametrize(
    "field, value",
    [
        ("ageGroup", "Toddler"),
        ("gender", "Unisex"),
        ("name", ""),
    ],
)
def test_create_profile_validation(client, auth_headers, field, value):
    payload = dict(DAD, **{field: value})
    response = client.post("/api/profiles", json=payload, headers=auth_headers)
    assert response.status_code == 422


def test_numeric_sizes_are_stored_as_strings(client, auth_headers):
    payload = dict(DAD, preferences={"shoeSize": 9, "shirtSize": "M"})
    created = client.post("/api/profiles", json=payload, headers=auth_headers).json()
    assert created["preferences"]["shoeSize"] == "9"
