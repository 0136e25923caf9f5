import unittest
from datetime import date

from studio.client import exports

STUDENTS = [
    {"name": "Ana", "email": "a@x.com", "phone": "111", "status": "Ativo", "plan": "Mensal",
     "created_at": "2024-01-05T10:30:00"},
    {"name": "Silva, Bia", "email": "b@x.com", "phone": None, "status": "Experimental", "plan": "Aula avulsa",
     "created_at": "2024-02-10T08:00:00+00:00"},
]


class TestExports(unittest.TestCase):

    def test_filename_uses_date(self):
        self.assertEqual(exports.export_filename("csv", date(2024, 3, 1)), "alunos_2024-03-01.csv")
        self.assertTrue(exports.export_filename("pdf").startswith(f"alunos_{date.today().isoformat()}"))

    def test_csv_rows(self):
        lines = exports.students_to_csv(STUDENTS).split("\n")
        self.assertEqual(lines[0], "Nome,Email,Telefone,Status,Plano,Data Cadastro")
        self.assertEqual(lines[1], "Ana,a@x.com,111,Ativo,Mensal,05/01/2024")
        # vírgula no nome é protegida por aspas
        self.assertEqual(lines[2], '"Silva, Bia",b@x.com,,Experimental,Aula avulsa,10/02/2024')
        self.assertEqual(len(lines), 3)

    def test_csv_only_header_for_empty_list(self):
        self.assertEqual(exports.students_to_csv([]), "Nome,Email,Telefone,Status,Plano,Data Cadastro")

    def test_pdf_is_generated(self):
        data = exports.students_to_pdf(STUDENTS)
        self.assertTrue(data.startswith(b"%PDF"))
        self.assertGreater(len(data), 500)


if __name__ == "__main__":
    unittest.main()
