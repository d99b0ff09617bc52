#!/usr/bin/env python3
"""
Undangan Quickstart — a whole invitation in one script.

Creates a wedding → invitation → guest, lets the "guest" RSVP and leave
a wish without a token, then reads everything back as the couple.
Run with: python examples/quickstart.py

Requires: pip install httpx
Backend must be running: http://localhost:3000
"""

import uuid

import httpx

from _common import BASE, create_client


def main():
    run_id = uuid.uuid4().hex[:6]
    client = create_client()

    # ── Wedding ───────────────────────────────────────────────────
    print("\n1. Creating wedding...")
    resp = client.post("/wedding", json={
        "groom_name": "Bima",
        "bride_name": "Ayu",
        "wedding_date": "2026-06-13",
        "akad_date": "2026-06-13T08:00:00",
        "reception_date": "2026-06-13T11:00:00",
        "location": "Gedung Serbaguna, Bandung",
    })
    assert resp.status_code == 201, f"Failed: {resp.text}"
    wedding = resp.json()
    print(f"   Wedding #{wedding['id_wedding']}: {wedding['groom_name']} & {wedding['bride_name']}")

    # ── Invitation ────────────────────────────────────────────────
    print("\n2. Publishing invitation...")
    slug = f"ayu-bima-{run_id}"
    resp = client.post("/invitation", json={
        "id_wedding": wedding["id_wedding"],
        "slug": slug,
        "theme": "rustic",
        "cover_text": "Together with their families",
        "status": "published",
    })
    assert resp.status_code == 201, f"Failed: {resp.text}"
    invitation = resp.json()
    print(f"   Public link: {BASE}/invitation/{slug}")

    # ── Details ───────────────────────────────────────────────────
    print("\n3. Adding gallery, love story and gift account...")
    for path, body in (
        ("/gallery", {"media_type": "photo", "file_url": "https://cdn.example.com/prewed.jpg"}),
        ("/love-story", {"title": "First met", "story_date": "2019-09-02"}),
        ("/gift", {"bank_name": "BCA", "account_name": "Ayu", "account_number": "1234567890"}),
    ):
        resp = client.post(path, json={"id_wedding": wedding["id_wedding"], **body})
        assert resp.status_code == 201, f"Failed {path}: {resp.text}"
        print(f"   {path}: ok")

    # ── Guest ─────────────────────────────────────────────────────
    print("\n4. Adding a guest...")
    resp = client.post("/guest", json={
        "id_invitation": invitation["id_invitation"],
        "guest_name": "Pak Budi",
        "invitation_type": "family",
    })
    assert resp.status_code == 201, f"Failed: {resp.text}"
    guest = resp.json()
    print(f"   Guest #{guest['id_guest']}: {guest['guest_name']}")

    # ── The guest's side (no token) ───────────────────────────────
    print("\n5. Guest opens the invitation, RSVPs and leaves a wish...")
    public = httpx.Client(base_url=BASE, timeout=10)
    resp = public.get(f"/invitation/{slug}")
    assert resp.status_code == 200, f"Failed: {resp.text}"
    print(f"   Opened: {resp.json()['cover_text']}")

    resp = public.post("/rsvp", json={
        "id_guest": guest["id_guest"],
        "attendance": "hadir",
        "total_guest": 2,
    })
    assert resp.status_code == 201, f"Failed: {resp.text}"
    resp = public.post("/wishes", json={
        "id_guest": guest["id_guest"],
        "message": "Selamat menempuh hidup baru!",
    })
    assert resp.status_code == 201, f"Failed: {resp.text}"

    # ── Back to the couple ────────────────────────────────────────
    print("\n6. Reading responses as the couple...")
    rsvps = client.get("/rsvp").json()
    wishes = client.get("/wishes").json()
    print(f"   RSVPs:  {len(rsvps)} ({sum(r['total_guest'] for r in rsvps)} people)")
    print(f"   Wishes: {len(wishes)}")
    for w in wishes:
        print(f"     \"{w['message']}\"")

    print("\nDone.")


if __name__ == "__main__":
    main()
