"""
Email bodies sent by the portal. German is the default language.
"""

from html import escape


def invitation_subject(club_name: str) -> str:
    return f"Einladung zu {club_name} auf Lions Hub"


def invitation_email_html(
    invite_url: str,
    club_name: str,
    role_name: str,
    invited_by_name: str,
    expires_in_days: int,
) -> str:
    url = escape(invite_url, quote=True)
    return f"""<!DOCTYPE html>
<html lang="de">
<body style="background-color:#f4f4f5;font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,sans-serif;">
  <div style="margin:0 auto;padding:40px 20px;max-width:560px;">
    <div style="background-color:#00338D;padding:30px 40px;border-radius:8px 8px 0 0;">
      <h1 style="color:#ffffff;font-size:24px;margin:0;text-align:center;">Lions Hub</h1>
    </div>
    <div style="background-color:#ffffff;padding:40px;border-radius:0 0 8px 8px;">
      <h2 style="color:#00338D;text-align:center;">Sie wurden eingeladen!</h2>
      <p><strong>{escape(invited_by_name)}</strong> hat Sie eingeladen, dem Lions Club
        <strong>{escape(club_name)}</strong> auf Lions Hub beizutreten.</p>
      <p>Ihre Rolle: <strong>{escape(role_name)}</strong></p>
      <p style="text-align:center;margin:32px 0;">
        <a href="{url}" style="background-color:#00338D;border-radius:8px;color:#ffffff;padding:14px 32px;text-decoration:none;font-weight:bold;">Einladung annehmen</a>
      </p>
      <p style="color:#6b7280;font-size:14px;">Oder kopieren Sie diesen Link in Ihren Browser:</p>
      <p style="font-size:12px;word-break:break-all;"><a href="{url}">{url}</a></p>
      <hr style="border-color:#e5e7eb;margin:24px 0;">
      <p style="color:#6b7280;font-size:14px;">Diese Einladung ist <strong>{expires_in_days} Tage</strong> gültig.
        Nach Ablauf muss eine neue Einladung angefordert werden.</p>
      <p style="color:#6b7280;font-size:14px;">Falls Sie diese Einladung nicht erwartet haben, können Sie diese Email ignorieren.</p>
    </div>
    <p style="color:#9ca3af;font-size:12px;text-align:center;">Lions Hub - Das Portal für Lions Clubs</p>
  </div>
</body>
</html>"""
