"""Fixed reply lines sent by the bot."""

NON_TEXT = "文字しか分かりません…"
NON_HIRAGANA = "全部ひらがなで送ってください"

NO_WORDS_LEFT = "返す言葉がないからぼくの負けだ…。ぼくに勝つなんてすごい！"
BOT_SELF_LOSS = "あ、ぼくの負けだ…。ぼくに勝つなんてすごい！"
LONG_VOWEL_UNFAIR = "でも長音ばっかりなんてズルいよ！"
YOUR_TURN = "次はあなたの番だよ！"

PLAYER_LOSS = "残念、あなたの負け！"
MY_TURN = "じゃあぼくから行くね！"
