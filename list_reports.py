import requests

BASE_URL = "http://127.0.0.1:3000"


def main():
    print("Obteniendo lista de reportes...")
    response = requests.get(f"{BASE_URL}/api/reports", headers={"Accept": "application/json"}, timeout=10)
    if response.status_code != 200:
        print("Error al obtener reportes:", response.text)
        return

    reports = response.json()
    print(f"Reportes: {len(reports)}")
    for report in reports:
        print(f"- {report['id']} [{report['riskLevel']}] {report['problemType']} @ {report['location']} -> {report['imageUrl']}")


if __name__ == "__main__":
    main()
