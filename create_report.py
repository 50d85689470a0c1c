import sys

import requests

BASE_URL = "http://127.0.0.1:3000"


def main(photo_path):
    # Subir un reporte con foto
    print("Subiendo un reporte...")
    create_report_url = f"{BASE_URL}/api/report"
    report_data = {
        "treeId": "A-014",
        "location": "中山路與民生路口",
        "problemType": "嚴重傾斜",
        "targetType": "人行道",
        "description": "樹幹明顯往車道傾斜",
        "riskLevel": "高風險",
    }

    with open(photo_path, "rb") as photo:
        response = requests.post(
            create_report_url,
            data=report_data,
            files={"photo": (photo_path, photo, "image/jpeg")},
            timeout=10,
        )
    print("Código de estado:", response.status_code)
    if response.status_code == 200:
        print("Reporte creado:", response.json()["report"])
    else:
        print("Error al crear reporte:", response.text)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Uso: python create_report.py <foto.jpg>")
        sys.exit(1)
    main(sys.argv[1])
