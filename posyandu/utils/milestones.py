import math

from posyandu.schemas.screening import Milestones

# (last month of bracket, age group, milestones)
MILESTONE_BRACKETS = [
    (3, "0-3 Bulan", [
        "Mengangkat kepala setinggi 45° saat tengkurap.",
        "Menggerakkan kepala dari kiri/kanan ke tengah.",
        "Melihat dan menatap wajah Anda.",
        "Mengoceh spontan atau bereaksi dengan mengoceh.",
    ]),
    (6, "3-6 Bulan", [
        "Berbalik dari telungkup ke telentang.",
        "Mengangkat kepala setinggi 90°.",
        "Meraih benda yang ada di dekatnya.",
        "Menirukan bunyi.",
    ]),
    (9, "6-9 Bulan", [
        "Duduk tanpa pegangan.",
        "Merangkak meraih mainan atau mendekati seseorang.",
        "Memindahkan benda dari satu tangan ke tangan lainnya.",
        "Mengeluarkan suara seperti 'ma-ma', 'da-da'.",
    ]),
    (12, "9-12 Bulan", [
        "Mengangkat badan ke posisi berdiri tanpa bantuan.",
        "Berjalan dengan dituntun.",
        "Menggenggam erat pensil.",
        "Menirukan kata.",
    ]),
    (18, "12-18 Bulan", [
        "Berdiri sendiri tanpa berpegangan.",
        "Berjalan mundur.",
        "Menumpuk 2 kubus.",
        "Mengucapkan 5-10 kata.",
    ]),
    (24, "18-24 Bulan", [
        "Berjalan sendiri dengan baik.",
        "Naik tangga atau memanjat kursi.",
        "Menumpuk 4 kubus.",
        "Mengucapkan kalimat 2 kata.",
    ]),
    (36, "2-3 Tahun", [
        "Berdiri dengan satu kaki selama 2-3 detik.",
        "Mencoret-coret pensil pada kertas.",
        "Mengenal 2-4 warna.",
        "Mengenakan pakaian sendiri.",
    ]),
    (48, "3-4 Tahun", [
        "Berdiri dengan satu kaki selama 6 detik.",
        "Mengayuh sepeda roda tiga.",
        "Menggambar lingkaran.",
        "Bermain bersama teman.",
    ]),
    (60, "4-5 Tahun", [
        "Melompat dengan satu kaki.",
        "Menggambar bentuk persegi.",
        "Menjawab pertanyaan sederhana.",
        "Berpakaian sendiri tanpa bantuan.",
    ]),
]


def developmental_milestones(age_in_months: float) -> Milestones:
    age = math.floor(age_in_months)
    for bracket_end, age_group, milestones in MILESTONE_BRACKETS:
        if age <= bracket_end:
            return Milestones(age_group=age_group, bracket_end=bracket_end, milestones=milestones)
    return Milestones(
        age_group="5+ Tahun",
        bracket_end=72,
        milestones=["Tidak ada data perkembangan untuk usia ini."],
    )
