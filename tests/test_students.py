import unittest

from support import ApiTestCase


class TestStudentsApi(ApiTestCase):

    def test_create_without_status_defaults_to_ativo(self):
        r = self.client.post("/api/students", json={"name": "Ana", "email": "a@x.com", "phone": "111", "plan": "Mensal"})
        self.assertEqual(r.status_code, 201)
        body = r.json()
        self.assertEqual(body["status"], "Ativo")
        self.assertEqual(body["name"], "Ana")
        self.assertEqual(body["plan"], "Mensal")
        self.assertIn("id", body)
        self.assertTrue(body["created_at"])

    def test_create_with_empty_status_defaults_to_ativo(self):
        body = self.create_student(status="")
        self.assertEqual(body["status"], "Ativo")

    def test_create_keeps_explicit_status(self):
        body = self.create_student(status="Experimental")
        self.assertEqual(body["status"], "Experimental")

    def test_created_ids_are_novel(self):
        ids = {self.create_student(name=f"Aluno {i}")["id"] for i in range(5)}
        self.assertEqual(len(ids), 5)

    def test_list_is_newest_first(self):
        first = self.create_student(name="Primeiro")
        second = self.create_student(name="Segundo")
        third = self.create_student(name="Terceiro")

        r = self.client.get("/api/students")
        self.assertEqual(r.status_code, 200)
        self.assertEqual([s["id"] for s in r.json()], [third["id"], second["id"], first["id"]])

    def test_list_empty(self):
        r = self.client.get("/api/students")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), [])

    def test_partial_update_only_touches_sent_fields(self):
        st = self.create_student(name="Bia", email="b@x.com", phone="222", plan="Trimestral")

        r = self.client.patch(f"/api/students/{st['id']}", json={"phone": "999"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["phone"], "999")

        listed = next(s for s in self.client.get("/api/students").json() if s["id"] == st["id"])
        self.assertEqual(listed["phone"], "999")
        self.assertEqual(listed["name"], "Bia")
        self.assertEqual(listed["email"], "b@x.com")
        self.assertEqual(listed["plan"], "Trimestral")
        self.assertEqual(listed["status"], "Ativo")
        self.assertEqual(listed["created_at"], st["created_at"])

    def test_soft_delete_keeps_student_marked_inativo(self):
        st = self.create_student()

        r = self.client.patch(f"/api/students/{st['id']}", json={"status": "Inativo"})
        self.assertEqual(r.status_code, 200)

        students = self.client.get("/api/students").json()
        self.assertEqual(len(students), 1)
        self.assertEqual(students[0]["id"], st["id"])
        self.assertEqual(students[0]["status"], "Inativo")

    def test_update_missing_student_is_store_error(self):
        r = self.client.patch("/api/students/999", json={"status": "Inativo"})
        self.assertEqual(r.status_code, 500)
        self.assertIn("999", r.json()["error"])

    def test_update_with_unknown_status_is_rejected_by_store(self):
        st = self.create_student()
        r = self.client.patch(f"/api/students/{st['id']}", json={"status": "Suspenso"})
        self.assertEqual(r.status_code, 500)
        self.assertIn("CHECK constraint failed", r.json()["error"])

    def test_create_without_name_is_rejected_by_store(self):
        r = self.client.post("/api/students", json={"email": "x@x.com"})
        self.assertEqual(r.status_code, 500)
        self.assertIn("NOT NULL", r.json()["error"])

    def test_hard_delete_removes_row(self):
        st = self.create_student()
        r = self.client.delete(f"/api/students/{st['id']}")
        self.assertEqual(r.status_code, 204)
        self.assertEqual(r.content, b"")
        self.assertEqual(self.client.get("/api/students").json(), [])

    def test_delete_missing_student_still_returns_204(self):
        r = self.client.delete("/api/students/5")
        self.assertEqual(r.status_code, 204)


if __name__ == "__main__":
    unittest.main()
