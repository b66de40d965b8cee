"""
API tests for holiday endpoints
"""

from rest_framework import status
from rest_framework.test import APISimpleTestCase

from holiday_registry.registry import builtin_statutory_holidays


class HolidayAPITest(APISimpleTestCase):
    url = "/api/v1/holidays/"

    def test_list_statutory_holidays(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), len(builtin_statutory_holidays()))
        self.assertEqual(response.data[0]["date"], "2025-01-01")
        self.assertEqual(response.data[0]["kind_label"], "Regular")

    def test_create_custom_holiday(self):
        response = self.client.post(
            self.url,
            {"date": "2025-06-24", "name": "City Foundation Day", "kind": "special"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["kind"], "SPECIAL")
        self.assertEqual(response.data["source"], "custom")

        custom = self.client.get(self.url, {"source": "custom"})
        self.assertEqual([item["date"] for item in custom.data], ["2025-06-24"])

    def test_blank_name_is_missing_field(self):
        response = self.client.post(
            self.url, {"date": "2025-06-24", "name": "", "kind": "SPECIAL"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "MISSING_FIELD")

    def test_unknown_kind_is_invalid_format(self):
        response = self.client.post(
            self.url, {"date": "2025-06-24", "name": "Party", "kind": "HALF"}, format="json"
        )

        self.assertEqual(response.data["code"], "INVALID_FORMAT")

    def test_delete_custom_holiday(self):
        self.client.post(
            self.url,
            {"date": "2025-06-24", "name": "City Foundation Day", "kind": "SPECIAL"},
            format="json",
        )

        response = self.client.delete(f"{self.url}2025-06-24/")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        response = self.client.delete(f"{self.url}2025-06-24/")
        self.assertEqual(response.data["code"], "INVALID_SELECTION")

    def test_statutory_holiday_cannot_be_deleted(self):
        response = self.client.delete(f"{self.url}2025-12-25/")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_SELECTION")

    def test_edit_statutory_holiday(self):
        response = self.client.put(
            f"{self.url}statutory/2025-06-12/",
            {"name": "Araw ng Kalayaan", "kind": "SPECIAL"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Araw ng Kalayaan")
        self.assertEqual(response.data["source"], "statutory")

    def test_edit_non_statutory_date(self):
        response = self.client.put(
            f"{self.url}statutory/2025-06-24/",
            {"name": "City Foundation Day", "kind": "SPECIAL"},
            format="json",
        )

        self.assertEqual(response.data["code"], "INVALID_SELECTION")
