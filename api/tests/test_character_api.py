"""
Tests for character queries and the createCharacter mutation.
"""

from api.tests.graphql_base import GraphQLAPITestCase
from campaigns.models import Campaign
from characters.models import Character

CHARACTER_SHEET = """
query Sheet($id: ID!) {
  character(id: $id) {
    id
    name
    isPublic
    speed
    hitPoints
    campaign { id name }
    stats { brawn charm intelligence reflexes tech luck }
    skills { name level }
    cybernetics { id name }
    weapons { id type }
    items { id type }
    vehicles { id }
  }
}
"""

CREATE_CHARACTER = """
mutation Create(
  $name: String!
  $campaignId: ID
  $stats: StatsInput
  $skills: [SkillInput!]
  $cyberneticIds: [ID!]
  $weaponIds: [ID!]
  $itemIds: [ID!]
  $vehicleIds: [ID!]
) {
  createCharacter(
    name: $name
    campaignId: $campaignId
    stats: $stats
    skills: $skills
    cyberneticIds: $cyberneticIds
    weaponIds: $weaponIds
    itemIds: $itemIds
    vehicleIds: $vehicleIds
  ) {
    id
    name
    isPublic
    speed
    hitPoints
    campaign { id }
    stats { brawn charm intelligence reflexes tech luck }
    skills { name level }
    cybernetics { id }
    weapons { id }
    items { id }
    vehicles { id }
  }
}
"""


class CharacterQueryTest(GraphQLAPITestCase):
    def setUp(self):
        super().setUp()
        self.member = self.create_user("member@example.com")
        self.outsider = self.create_user("outsider@example.com")
        Campaign.objects.get(pk="camp_1").add_member(self.member)

    def test_characters_requires_authentication(self):
        response = self.graphql("query { characters { id } }")
        self.assertGraphQLError(response, "Not authenticated")

    def test_outsider_sees_public_characters_only(self):
        self.login_as(self.outsider)
        data = self.assertNoErrors(self.graphql("query { characters { id } }"))
        self.assertEqual(data["characters"], [{"id": "c_2"}])

    def test_member_sees_campaign_characters(self):
        self.login_as(self.member)
        data = self.assertNoErrors(self.graphql("query { characters { id } }"))
        self.assertEqual([c["id"] for c in data["characters"]], ["c_1", "c_2"])

    def test_owner_sees_own_private_character(self):
        Character.objects.create(name="Private", owner=self.outsider)
        self.login_as(self.outsider)

        data = self.assertNoErrors(self.graphql("query { characters { name } }"))

        self.assertIn({"name": "Private"}, data["characters"])

    def test_character_sheet(self):
        self.login_as(self.member)

        data = self.assertNoErrors(self.graphql(CHARACTER_SHEET, {"id": "c_1"}))

        self.assertEqual(
            data["character"],
            {
                "id": "c_1",
                "name": "Nova",
                "isPublic": False,
                "speed": 30,
                "hitPoints": 5,
                "campaign": {"id": "camp_1", "name": "Neon Rain"},
                "stats": {
                    "brawn": 2,
                    "charm": 4,
                    "intelligence": 6,
                    "reflexes": 7,
                    "tech": 5,
                    "luck": 1,
                },
                "skills": [
                    {"name": "Hacking", "level": 6},
                    {"name": "Awareness", "level": 4},
                ],
                "cybernetics": [{"id": "cy_1", "name": "Reflex Booster"}],
                "weapons": [{"id": "w_1", "type": "MELEE"}, {"id": "w_2", "type": "RANGED"}],
                "items": [{"id": "i_1", "type": "CYBERDECK"}],
                "vehicles": [{"id": "v_1"}],
            },
        )

    def test_invisible_character_is_null(self):
        self.login_as(self.member)
        data = self.assertNoErrors(self.graphql(CHARACTER_SHEET, {"id": "c_3"}))
        self.assertIsNone(data["character"])

    def test_character_without_campaign(self):
        self.login_as(self.outsider)
        data = self.assertNoErrors(self.graphql(CHARACTER_SHEET, {"id": "c_2"}))
        self.assertIsNone(data["character"]["campaign"])
        self.assertEqual(data["character"]["hitPoints"], 3)


class CreateCharacterTest(GraphQLAPITestCase):
    def setUp(self):
        super().setUp()
        self.user = self.create_user("runner@example.com")
        self.login_as(self.user)

    def create(self, **variables):
        variables.setdefault("name", "Vex")
        return self.graphql(CREATE_CHARACTER, variables)

    def test_requires_authentication(self):
        self.logout_client()
        self.assertGraphQLError(self.create(), "Not authenticated")
        self.assertFalse(Character.objects.filter(name="Vex").exists())

    def test_defaults(self):
        data = self.assertNoErrors(self.create())["createCharacter"]

        self.assertTrue(data["id"].startswith("c_"))
        self.assertEqual(data["name"], "Vex")
        self.assertFalse(data["isPublic"])
        self.assertEqual(data["speed"], 30)
        self.assertEqual(data["hitPoints"], 5)
        self.assertIsNone(data["campaign"])
        self.assertEqual(set(data["stats"].values()), {0})
        self.assertEqual(data["skills"], [])
        self.assertEqual(Character.objects.get(pk=data["id"]).owner, self.user)

    def test_full_sheet(self):
        Campaign.objects.get(pk="camp_3").add_member(self.user)

        response = self.create(
            campaignId="camp_3",
            stats={"brawn": 4, "tech": 6},
            skills=[{"name": "Stealth", "level": 3}, {"name": "Hacking", "level": 1}],
            cyberneticIds=["cy_1"],
            weaponIds=["w_2", "w_1"],
            itemIds=["i_1"],
            vehicleIds=["v_1"],
        )

        data = self.assertNoErrors(response)["createCharacter"]
        self.assertEqual(data["campaign"], {"id": "camp_3"})
        self.assertEqual(data["stats"]["brawn"], 4)
        self.assertEqual(data["stats"]["tech"], 6)
        self.assertEqual(data["stats"]["luck"], 0)
        self.assertEqual(
            data["skills"],
            [{"name": "Stealth", "level": 3}, {"name": "Hacking", "level": 1}],
        )
        self.assertEqual(data["weapons"], [{"id": "w_2"}, {"id": "w_1"}])
        self.assertEqual(data["cybernetics"], [{"id": "cy_1"}])
        self.assertEqual(data["items"], [{"id": "i_1"}])
        self.assertEqual(data["vehicles"], [{"id": "v_1"}])

    def test_created_character_is_listed(self):
        data = self.assertNoErrors(self.create())["createCharacter"]
        listed = self.assertNoErrors(self.graphql("query { characters { id } }"))
        self.assertIn({"id": data["id"]}, listed["characters"])

    def test_duplicate_gear_ids_attach_once(self):
        data = self.assertNoErrors(self.create(weaponIds=["w_1", "w_1"]))
        self.assertEqual(data["createCharacter"]["weapons"], [{"id": "w_1"}])

    def test_unknown_campaign(self):
        self.assertGraphQLError(self.create(campaignId="camp_404"), "Campaign not found")

    def test_campaign_requires_membership(self):
        self.assertGraphQLError(self.create(campaignId="camp_1"), "Not authorized")
        self.assertFalse(Character.objects.filter(name="Vex").exists())

    def test_unknown_weapon(self):
        response = self.create(weaponIds=["w_1", "w_999"])
        self.assertGraphQLError(response, "Unknown weapon: w_999")
        self.assertFalse(Character.objects.filter(name="Vex").exists())

    def test_gear_of_the_wrong_kind(self):
        response = self.create(itemIds=["v_1"])
        self.assertGraphQLError(response, "Unknown item: v_1")

    def test_negative_stat(self):
        response = self.create(stats={"luck": -1})
        self.assertGraphQLError(response, "Stats must be zero or greater")

    def test_negative_skill_level(self):
        response = self.create(skills=[{"name": "Stealth", "level": -2}])
        self.assertGraphQLError(response, "Skill level must be zero or greater")

    def test_blank_name(self):
        self.assertGraphQLError(self.create(name="   "), "Name is required")

    def test_name_too_long(self):
        response = self.create(name="x" * 101)
        self.assertGraphQLError(response, "Name must be at most 100 characters")
