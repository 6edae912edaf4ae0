"""Example prompts written to an empty library, one per default category."""

EXAMPLE_PROMPTS = [
    {
        "title": "Academic Article Summary",
        "description": "Concise summaries of scientific articles that keep the main points",
        "content": (
            "Summarize the following academic article in 3 main points, keeping a "
            "scientific tone and highlighting:\n\n"
            "1. Main goal of the study\n"
            "2. Methodology used\n"
            "3. Conclusions and implications\n\n"
            "Article: [PASTE ARTICLE TEXT HERE]\n\n"
            "Format: use a bullet for each point and be concise but informative."
        ),
        "category": "Studies",
        "tags": ["summary", "academic", "research", "scientific"],
        "tone": "Formal",
    },
    {
        "title": "Creative Instagram Post",
        "description": "Engaging Instagram posts with hooks, emojis and hashtags",
        "content": (
            "Write an Instagram post about [TOPIC/PRODUCT] with this structure:\n\n"
            "📱 Opening HOOK (a first line that grabs attention)\n"
            "💡 Body (2-3 explanatory sentences)\n"
            "🎯 Call to action at the end\n\n"
            "Use:\n"
            "- Relevant emojis\n"
            "- A [casual/professional] tone\n"
            "- 5-7 popular hashtags\n"
            "- At most 150 words\n\n"
            "Goal: [engage/sell/inform/educate]"
        ),
        "category": "Marketing",
        "tags": ["instagram", "social media", "post", "engagement"],
        "tone": "Creative",
    },
    {
        "title": "Code Debugging and Review",
        "description": "Reviews code for bugs, performance improvements and good practices",
        "content": (
            "Review the following [LANGUAGE] code and provide:\n\n"
            "🔍 **BUGS:**\n"
            "- Possible logic errors\n"
            "- Syntax problems\n"
            "- Unhandled edge cases\n\n"
            "⚡ **OPTIMIZATION:**\n"
            "- Performance improvements\n"
            "- Suggested refactoring\n"
            "- More efficient patterns\n\n"
            "✅ **GOOD PRACTICES:**\n"
            "- Naming conventions\n"
            "- Code structure\n"
            "- Missing documentation\n\n"
            "Code:\n[PASTE CODE HERE]"
        ),
        "category": "Programming",
        "tags": ["debug", "code", "programming", "optimization"],
        "tone": "Technical",
    },
    {
        "title": "Personalized Professional E-mail",
        "description": "Professional e-mails for different contexts and recipients",
        "content": (
            "Write a professional e-mail with these parameters:\n\n"
            "📧 **CONTEXT:**\n"
            "Recipient: [NAME/ROLE]\n"
            "Subject: [MAIN TOPIC]\n"
            "Goal: [inform/request/thank/resolve]\n"
            "Tone: [formal/cordial/urgent]\n\n"
            "📝 **STRUCTURE:**\n"
            "- Greeting suited to the context\n"
            "- Clear introduction of the reason\n"
            "- Organized body\n"
            "- Specific call to action\n"
            "- Professional closing\n\n"
            "⏰ Urgency: [low/medium/high]\n"
            "🎯 Expected outcome: [DESCRIBE]"
        ),
        "category": "Customer Service",
        "tags": ["email", "communication", "professional", "business"],
        "tone": "Formal",
    },
    {
        "title": "Creative Idea Brainstorm",
        "description": "Many creative ideas for projects, campaigns or solutions",
        "content": (
            "Brainstorm creatively about [TOPIC/CHALLENGE] and produce:\n\n"
            "💡 **10 MAIN IDEAS:**\n"
            "(Number them 1-10, be specific and creative)\n\n"
            "🎨 **3 INNOVATIVE CONCEPTS:**\n"
            "- Disruptive idea 1: [explanation]\n"
            "- Unusual approach 2: [explanation]\n"
            "- Creative solution 3: [explanation]\n\n"
            "🎯 **CRITERIA:**\n"
            "- Audience: [DEFINE]\n"
            "- Budget: [low/medium/high]\n"
            "- Deadline: [DEFINE]\n"
            "- Goal: [DEFINE]\n\n"
            "Think outside the box and explore different angles!"
        ),
        "category": "Creativity",
        "tags": ["brainstorm", "ideas", "creativity", "innovation"],
        "tone": "Creative",
    },
]
