import uuid

from locust import HttpUser, task, between


class LabUser(HttpUser):
    wait_time = between(1, 3)

    def on_start(self):
        username = f"load-{uuid.uuid4().hex[:8]}"
        payload = {"username": username, "email": f"{username}@lab.com", "password": "password"}
        r = self.client.post("/user/register", json=payload)
        if r.status_code != 201:
            r = self.client.post("/user/login", json={"username": username, "password": "password"})
        self.user_id = r.json()["user"]["id"]
        lab = self.client.post("/lab/create", json={"name": f"bench lab {username}"})
        self.lab_id = lab.json()["lab"]["id"]

    @task(3)
    def list_lab_mice(self):
        self.client.get(f"/mouse/lab/{self.lab_id}", name="/mouse/lab/[id]")

    @task(1)
    def create_mouse(self):
        data = {
            "name": f"bench-{uuid.uuid4().hex[:12]}",
            "sex": "female",
            "genotype": "WT",
            "strain": "C57BL/6J",
            "birthDate": "2024-01-01",
            "userId": self.user_id,
            "labId": self.lab_id,
        }
        self.client.post("/mouse/create", json=data)
