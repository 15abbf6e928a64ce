from app.db.session import SessionLocal
from app.models.employee import Employee
from app.services.employee_store import EmployeeStore

DEMO_EMPLOYEES = [
    {"name": "John Doe", "email": "john@example.com", "position": "Developer",
     "phone": "123-456-7890", "department": "Engineering"},
    {"name": "Jane Smith", "email": "jane@example.com", "position": "Designer",
     "phone": "987-654-3210", "department": "Design"},
    {"name": "María Rodríguez", "email": "maria@example.com", "position": "Product Manager",
     "department": "Product"},
]

def upsert_employee(db, fields: dict) -> Employee:
    emp = db.query(Employee).filter(Employee.email == fields["email"]).one_or_none()
    if emp:
        return emp
    return EmployeeStore(db).create(fields)

def main():
    db = SessionLocal()
    try:
        seeded = [upsert_employee(db, fields) for fields in DEMO_EMPLOYEES]

        print("Seeded employees:")
        for e in seeded:
            print(e.id, e.name, e.email, e.position)
    finally:
        db.close()

if __name__ == "__main__":
    main()
